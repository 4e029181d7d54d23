# smarthome/core/__init__.py
"""Core infrastructure components for the smart home controller."""

# Import order: most fundamental to most specific

from .exceptions import (
    SmartHomeError,
    ConfigurationError,
    DuplicateNameError,
    UnknownStrategyError,
)
from .activity_log import ActivityLog, LogEntry, SYSTEM_CHANNEL, CHAT_CHANNEL
from .patterns.observer import DeviceObserver, DeviceSubject, DeviceChangeRecorder


__all__ = [
    "SmartHomeError",            # make available at package root
    "ConfigurationError",
    "DuplicateNameError",
    "UnknownStrategyError",
    "ActivityLog",
    "LogEntry",
    "SYSTEM_CHANNEL",
    "CHAT_CHANNEL",
    "DeviceObserver",
    "DeviceSubject",
    "DeviceChangeRecorder",
]
