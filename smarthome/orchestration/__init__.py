# smarthome/orchestration/__init__.py
"""Command layer: reversible device commands, decorators and the invoker."""

from .commands import (
    Command,
    CommandKind,
    DeviceCommand,
    TurnOnLightCommand,
    TurnOffLightCommand,
    LockDoorCommand,
    UnlockDoorCommand,
)
from .decorators import (
    CommandDecorator,
    SafetyRule,
    LightsOffWhileDoorUnlockedRule,
    AuthorizationWrapper,
    AuditWrapper,
)
from .invoker import Invoker, NOTHING_TO_UNDO

__all__ = [
    'Command',
    'CommandKind',
    'DeviceCommand',
    'TurnOnLightCommand',
    'TurnOffLightCommand',
    'LockDoorCommand',
    'UnlockDoorCommand',
    'CommandDecorator',
    'SafetyRule',
    'LightsOffWhileDoorUnlockedRule',
    'AuthorizationWrapper',
    'AuditWrapper',
    'Invoker',
    'NOTHING_TO_UNDO',
]
