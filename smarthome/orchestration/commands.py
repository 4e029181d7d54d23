from abc import ABC, abstractmethod
from enum import Enum
import logging

from smarthome.models.devices import Device, Lock


class CommandKind(Enum):
    TURN_ON_LIGHT  = "turn_on_light"
    TURN_OFF_LIGHT = "turn_off_light"
    LOCK_DOOR      = "lock_door"
    UNLOCK_DOOR    = "unlock_door"


class Command(ABC):
    """Contract shared by every command and every command decorator"""

    kind: CommandKind

    @abstractmethod
    def execute(self) -> str:
        """Apply the action and return a result line"""
        pass

    @abstractmethod
    def undo(self) -> str:
        """Apply the inverse action and return a result line"""
        pass

    @property
    def refused(self) -> bool:
        """True when the last execute() was vetoed instead of applied"""
        return False

    @property
    def name(self) -> str:
        return self.__class__.__name__


class DeviceCommand(Command):
    """Reversible action bound to a single device at construction time"""

    def __init__(self, device: Device):
        self.device = device
        self.logger = logging.getLogger(self.__class__.__name__)


class TurnOnLightCommand(DeviceCommand):
    kind = CommandKind.TURN_ON_LIGHT

    def execute(self) -> str:
        return self.device.turn_on()

    def undo(self) -> str:
        return self.device.turn_off()


class TurnOffLightCommand(DeviceCommand):
    kind = CommandKind.TURN_OFF_LIGHT

    def execute(self) -> str:
        return self.device.turn_off()

    def undo(self) -> str:
        return self.device.turn_on()


class LockDoorCommand(DeviceCommand):
    kind = CommandKind.LOCK_DOOR

    def __init__(self, door: Lock):
        super().__init__(door)

    def execute(self) -> str:
        return self.device.lock()

    def undo(self) -> str:
        return self.device.unlock()


class UnlockDoorCommand(DeviceCommand):
    kind = CommandKind.UNLOCK_DOOR

    def __init__(self, door: Lock):
        super().__init__(door)

    def execute(self) -> str:
        return self.device.unlock()

    def undo(self) -> str:
        return self.device.lock()
