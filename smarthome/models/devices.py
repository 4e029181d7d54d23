from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from config.app_config import settings
from smarthome.core.patterns.observer import DeviceSubject


class DeviceKind(Enum):
    LIGHT              = auto()
    LOCK               = auto()
    TEMPERATURE_SENSOR = auto()
    LEGACY             = auto()
    GENERIC            = auto()


###############################################################################
# 1. STATUS SNAPSHOT ----------------------------------------------------------
###############################################################################

@dataclass(frozen=True, slots=True)
class DeviceStatus:
    """Read-only projection of a device's state at one instant."""
    name: str
    kind: DeviceKind
    is_on: bool
    is_locked: Optional[bool] = None
    temperature: Optional[float] = None

    def describe(self) -> str:
        parts = ["ON" if self.is_on else "OFF"]
        if self.is_locked is not None:
            parts.append("LOCKED" if self.is_locked else "UNLOCKED")
        if self.temperature is not None:
            parts.append(f"{_fmt_temp(self.temperature)}C")
        return " ".join(parts)


###############################################################################
# 2. DEVICES ------------------------------------------------------------------
###############################################################################

class Device(DeviceSubject):
    """Base controllable device: a name, an on/off flag and its observers.

    Every transition mutates state, notifies observers, then returns a
    human-readable confirmation. There are no guarded preconditions here.
    """

    kind = DeviceKind.GENERIC
    label = "Device"

    def __init__(self, name: str):
        super().__init__()
        self._name = name
        self.is_on = False

    @property
    def name(self) -> str:
        return self._name

    def turn_on(self) -> str:
        self.is_on = True
        self.notify_observers()
        return f"{self.label} {self.name} turned on"

    def turn_off(self) -> str:
        self.is_on = False
        self.notify_observers()
        return f"{self.label} {self.name} turned off"

    def status(self) -> DeviceStatus:
        return DeviceStatus(name=self.name, kind=self.kind, is_on=self.is_on)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r}, {self.status().describe()})"


class Light(Device):
    kind = DeviceKind.LIGHT
    label = "Light"


class Lock(Device):
    """Door lock. `is_locked` is independent of the on/off flag."""
    kind = DeviceKind.LOCK
    label = "Door"

    def __init__(self, name: str, locked: bool = True):
        super().__init__(name)
        self.is_locked = locked

    def lock(self) -> str:
        self.is_locked = True
        self.notify_observers()
        return f"Door {self.name} locked"

    def unlock(self) -> str:
        self.is_locked = False
        self.notify_observers()
        return f"Door {self.name} unlocked"

    def status(self) -> DeviceStatus:
        return DeviceStatus(name=self.name, kind=self.kind, is_on=self.is_on,
                            is_locked=self.is_locked)


class TemperatureSensor(Device):
    kind = DeviceKind.TEMPERATURE_SENSOR
    label = "Temperature sensor"

    def __init__(self, name: str, temperature: Optional[float] = None):
        super().__init__(name)
        self.temperature = settings.DEFAULT_TEMPERATURE if temperature is None else temperature

    def set_temperature(self, temperature: float) -> str:
        self.temperature = temperature
        self.notify_observers()
        return f"Temperature sensor {self.name} updated to {_fmt_temp(temperature)}C"

    def status(self) -> DeviceStatus:
        return DeviceStatus(name=self.name, kind=self.kind, is_on=self.is_on,
                            temperature=self.temperature)


###############################################################################
# 3. LEGACY DEVICES -----------------------------------------------------------
###############################################################################

class LegacyDevice:
    """Pre-existing appliance with its own activate/deactivate vocabulary."""

    def __init__(self, name: str):
        self.name = name

    def activate(self) -> str:
        return f"Old device {self.name} activated"

    def deactivate(self) -> str:
        return f"Old device {self.name} deactivated"


class LegacyDeviceAdapter(Device):
    """Presents a `LegacyDevice` through the standard on/off contract."""
    kind = DeviceKind.LEGACY

    def __init__(self, legacy: LegacyDevice):
        super().__init__(legacy.name)
        self.legacy = legacy

    def turn_on(self) -> str:
        self.is_on = True
        self.notify_observers()
        return self.legacy.activate()

    def turn_off(self) -> str:
        self.is_on = False
        self.notify_observers()
        return self.legacy.deactivate()


###############################################################################
# 4. HELPERS ------------------------------------------------------------------
###############################################################################

def _fmt_temp(value: float) -> str:
    """Render 16.0 as '16' and 16.5 as '16.5'."""
    return f"{value:g}"
