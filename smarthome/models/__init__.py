"""Device models and domain objects."""

from .devices import (
    Device,
    DeviceKind,
    DeviceStatus,
    Light,
    Lock,
    TemperatureSensor,
    LegacyDevice,
    LegacyDeviceAdapter,
)

__all__ = [
    'Device',
    'DeviceKind',
    'DeviceStatus',
    'Light',
    'Lock',
    'TemperatureSensor',
    'LegacyDevice',
    'LegacyDeviceAdapter',
]
