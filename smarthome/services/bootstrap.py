"""Default household wiring and the scripted day simulation."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional
import time

from config.app_config import settings
from smarthome.core.patterns.observer import DeviceChangeRecorder
from smarthome.heating.heating_system import HeatingSystem
from smarthome.messaging.user import User
from smarthome.models.devices import (
    Light, Lock, TemperatureSensor, LegacyDevice, LegacyDeviceAdapter,
)
from .facade import SmartHomeFacade
from .registry import HomeRegistry

SENSOR_NAME = "Temperature Sensor"


@dataclass
class Home:
    registry: HomeRegistry
    facade: SmartHomeFacade
    heating: HeatingSystem


def build_default_home(registry: Optional[HomeRegistry] = None) -> Home:
    registry = registry or HomeRegistry()
    recorder = DeviceChangeRecorder(registry.system_log)
    heating = HeatingSystem(registry.system_log)
    registry.add_sensor_observer(heating)

    light = registry.add_device(Light(settings.LIVING_ROOM_LIGHT_NAME))
    door = registry.add_device(Lock(settings.FRONT_DOOR_NAME))
    sensor = registry.add_device(TemperatureSensor(SENSOR_NAME))
    thermostat = registry.add_device(LegacyDeviceAdapter(LegacyDevice("Old Thermostat")))
    for device in (light, door, sensor, thermostat):
        device.subscribe(recorder)

    registry.add_user(User("John"))
    registry.add_user(User("Mary"))

    registry.system_log.append("Smart Home System initialized")
    registry.system_log.append(f"Devices: {len(registry.devices)}")
    registry.system_log.append(f"Users: {len(registry.users)}")
    return Home(registry=registry, facade=SmartHomeFacade(registry), heating=heating)


def simulate_day(home: Home, delay: Optional[float] = None,
                 sleep: Callable[[float], None] = time.sleep) -> List[str]:
    """Arrive, chat, cool down, chat, leave. Returns every step's result lines."""
    delay = settings.DEMO_STEP_DELAY if delay is None else delay
    registry = home.registry
    registry.system_log.append("Starting day simulation...")

    def cold_snap() -> List[str]:
        sensor = registry.find_device(SENSOR_NAME)
        return [sensor.set_temperature(16)] if sensor is not None else []

    def say(sender: str, to: str, text: str) -> Callable[[], List[str]]:
        def step() -> List[str]:
            user = registry.find_user(sender)
            if user is not None:
                user.send_message(to, text)
            return []
        return step

    steps = [
        home.facade.arrive_home,
        say("John", registry.router.broadcast_address, "Good morning everyone!"),
        cold_snap,
        say("Mary", "John", "The house is getting cold!"),
        home.facade.leave_home,
    ]
    results: List[str] = []
    for step in steps:
        if delay > 0:
            sleep(delay)
        results.extend(step())
    return results
