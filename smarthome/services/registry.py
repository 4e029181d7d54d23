"""Home-wide registry of devices and users.

Constructed once at startup and passed explicitly to whatever needs it.
Lookups by name return the first match; names are unique per collection.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import logging

from config.app_config import settings
from smarthome.core.activity_log import ActivityLog, SYSTEM_CHANNEL, CHAT_CHANNEL
from smarthome.core.exceptions import DuplicateNameError
from smarthome.core.patterns.observer import DeviceObserver
from smarthome.messaging.router import MessageRouter
from smarthome.messaging.user import User
from smarthome.models.devices import Device, DeviceKind, DeviceStatus


@dataclass(frozen=True, slots=True)
class HomeStatus:
    temperature: float
    users_at_home: int
    active_devices: int


class HomeRegistry:
    def __init__(self, system_log: Optional[ActivityLog] = None,
                 chat_log: Optional[ActivityLog] = None,
                 router: Optional[MessageRouter] = None,
                 sensor_observers: Optional[List[DeviceObserver]] = None):
        self.system_log = system_log or ActivityLog(SYSTEM_CHANNEL)
        self.chat_log   = chat_log or ActivityLog(CHAT_CHANNEL)
        self.router     = router or MessageRouter(self.chat_log)
        self.devices: List[Device] = []
        self.users:   List[User] = []
        self.sensor_observers: List[DeviceObserver] = []
        self.log = logging.getLogger(self.__class__.__name__)
        for observer in sensor_observers or []:
            self.add_sensor_observer(observer)

    # --------------------------------------------------------------------- #
    #  Registration
    # --------------------------------------------------------------------- #
    def add_device(self, device: Device) -> Device:
        if self.find_device(device.name) is not None:
            raise DuplicateNameError(f"device already registered: {device.name}")
        self.devices.append(device)
        if device.kind is DeviceKind.TEMPERATURE_SENSOR:
            for observer in self.sensor_observers:
                device.subscribe(observer)
        self.log.debug("registered device %s (%s)", device.name, device.kind.name)
        return device

    def add_sensor_observer(self, observer: DeviceObserver) -> None:
        """Watch every temperature sensor, present and future."""
        if observer in self.sensor_observers:
            return
        self.sensor_observers.append(observer)
        for device in self.devices:
            if device.kind is DeviceKind.TEMPERATURE_SENSOR:
                device.subscribe(observer)

    def add_user(self, user: User) -> User:
        if self.find_user(user.name) is not None:
            raise DuplicateNameError(f"user already registered: {user.name}")
        self.users.append(user)
        self.router.add_user(user)
        return user

    # --------------------------------------------------------------------- #
    #  Lookup
    # --------------------------------------------------------------------- #
    def find_device(self, name: str) -> Optional[Device]:
        return next((d for d in self.devices if d.name == name), None)

    def find_user(self, name: str) -> Optional[User]:
        return next((u for u in self.users if u.name == name), None)

    # --------------------------------------------------------------------- #
    #  Snapshots
    # --------------------------------------------------------------------- #
    def status(self) -> HomeStatus:
        sensor = next((d for d in self.devices
                       if d.kind is DeviceKind.TEMPERATURE_SENSOR), None)
        temperature = sensor.temperature if sensor is not None else settings.DEFAULT_TEMPERATURE
        return HomeStatus(
            temperature=temperature,
            users_at_home=len(self.users),
            active_devices=sum(1 for d in self.devices if d.is_on),
        )

    def device_statuses(self) -> List[DeviceStatus]:
        return [d.status() for d in self.devices]
