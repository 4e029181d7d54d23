"""
Observer Pattern Implementation for Device State Changes

Devices are subjects: every state transition notifies the subscribed
observers synchronously, after the mutation is applied and before the
transition returns its result string.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from smarthome.core.activity_log import ActivityLog
    from smarthome.models.devices import Device


class DeviceObserver(ABC):
    """Abstract base class for device observers."""

    @abstractmethod
    def on_device_changed(self, device: "Device") -> None:
        """Handle a device state change. `device` is already in its new state."""
        pass

    def get_observer_id(self) -> str:
        """Get identifier for this observer (used in log lines)."""
        return self.__class__.__name__


class DeviceSubject:
    """Subject that notifies observers of device state changes."""

    def __init__(self):
        self._observers: List[DeviceObserver] = []
        self._logger = logging.getLogger(self.__class__.__name__)

    def subscribe(self, observer: DeviceObserver) -> None:
        """Subscribe an observer to state changes."""
        if observer not in self._observers:
            self._observers.append(observer)
            self._logger.debug(f"Subscribed observer: {observer.get_observer_id()}")
        else:
            self._logger.warning(f"Observer already subscribed: {observer.get_observer_id()}")

    def unsubscribe(self, observer: DeviceObserver) -> None:
        """Unsubscribe an observer from state changes."""
        if observer in self._observers:
            self._observers.remove(observer)
            self._logger.debug(f"Unsubscribed observer: {observer.get_observer_id()}")
        else:
            self._logger.warning(f"Observer not found for unsubscription: {observer.get_observer_id()}")

    def notify_observers(self) -> None:
        """Notify every current observer exactly once, in subscription order."""
        # snapshot: an observer may unsubscribe itself while being notified
        for observer in list(self._observers):
            observer.on_device_changed(self)

    def get_observer_count(self) -> int:
        """Get the number of registered observers."""
        return len(self._observers)

    def get_observer_ids(self) -> List[str]:
        """Get list of all registered observer IDs."""
        return [observer.get_observer_id() for observer in self._observers]


class DeviceChangeRecorder(DeviceObserver):
    """Writes a line to the system log for every observed device change."""

    def __init__(self, system_log: "ActivityLog"):
        self.system_log = system_log

    def on_device_changed(self, device: "Device") -> None:
        self.system_log.append(f"{device.name} is now {device.status().describe()}")
