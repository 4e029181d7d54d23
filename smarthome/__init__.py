"""Smart Home Controller - Main Package"""

__version__ = '1.0.0'
__description__ = 'Device control and notification engine for a simulated home'

# Core - most fundamental
from .core import ActivityLog, DeviceObserver, DeviceChangeRecorder, SmartHomeError

# Models - domain objects
from .models import Device, Light, Lock, TemperatureSensor, LegacyDevice, LegacyDeviceAdapter

# Commands
from .orchestration import (
    CommandKind,
    TurnOnLightCommand,
    TurnOffLightCommand,
    LockDoorCommand,
    UnlockDoorCommand,
    AuthorizationWrapper,
    AuditWrapper,
    Invoker,
)

# Heating
from .heating import HeatingSystem, HeatingStrategyFactory, EcoMode, ComfortMode

# Messaging
from .messaging import User, MessageRouter

# Services
from .services import HomeRegistry, SmartHomeFacade, build_default_home, simulate_day

__all__ = [
    # Core
    'ActivityLog',
    'DeviceObserver',
    'DeviceChangeRecorder',
    'SmartHomeError',

    # Models
    'Device',
    'Light',
    'Lock',
    'TemperatureSensor',
    'LegacyDevice',
    'LegacyDeviceAdapter',

    # Commands
    'CommandKind',
    'TurnOnLightCommand',
    'TurnOffLightCommand',
    'LockDoorCommand',
    'UnlockDoorCommand',
    'AuthorizationWrapper',
    'AuditWrapper',
    'Invoker',

    # Heating
    'HeatingSystem',
    'HeatingStrategyFactory',
    'EcoMode',
    'ComfortMode',

    # Messaging
    'User',
    'MessageRouter',

    # Services
    'HomeRegistry',
    'SmartHomeFacade',
    'build_default_home',
    'simulate_day',
]
