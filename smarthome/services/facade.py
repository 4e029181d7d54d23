from typing import List, Optional
import logging

from config.app_config import settings
from smarthome.orchestration.commands import (
    Command,
    TurnOnLightCommand,
    TurnOffLightCommand,
    LockDoorCommand,
    UnlockDoorCommand,
)
from smarthome.orchestration.decorators import AuditWrapper, AuthorizationWrapper
from smarthome.models.devices import Device, DeviceKind
from smarthome.orchestration.invoker import Invoker
from .registry import HomeRegistry


class SmartHomeFacade:
    """Named scenarios composed from registry lookups, decorated commands and the invoker.

    Each scenario runs its steps in a fixed order, skips any step whose device
    is not registered (or is not a lock, for door steps), and returns the
    result lines of the steps that ran.
    """

    def __init__(self, registry: HomeRegistry, invoker: Optional[Invoker] = None,
                 light_name: Optional[str] = None, door_name: Optional[str] = None):
        self.registry   = registry
        self.invoker    = invoker or Invoker()
        self.light_name = light_name or settings.LIVING_ROOM_LIGHT_NAME
        self.door_name  = door_name or settings.FRONT_DOOR_NAME
        self.logger = logging.getLogger(self.__class__.__name__)

    def leave_home(self) -> List[str]:
        results: List[str] = []

        light = self.registry.find_device(self.light_name)
        if light is not None:
            guarded = AuthorizationWrapper(TurnOffLightCommand(light), self.registry)
            results.append(self._run(guarded))

        door = self._find_door()
        if door is not None:
            results.append(self._run(LockDoorCommand(door)))

        self.registry.system_log.append("Left home mode activated")
        return results

    def arrive_home(self) -> List[str]:
        results: List[str] = []

        door = self._find_door()
        if door is not None:
            results.append(self._run(UnlockDoorCommand(door)))

        light = self.registry.find_device(self.light_name)
        if light is not None:
            results.append(self._run(TurnOnLightCommand(light)))

        self.registry.system_log.append("Arrived home mode activated")
        return results

    def undo_last(self) -> str:
        return self.invoker.undo()

    def _find_door(self) -> Optional[Device]:
        """The front door, or None when absent or registered as something without a lock."""
        door = self.registry.find_device(self.door_name)
        if door is not None and door.kind is not DeviceKind.LOCK:
            self.logger.warning(f"{self.door_name} is a {door.kind.name}, not a lock; skipping")
            return None
        return door

    def _run(self, command: Command) -> str:
        return self.invoker.press_button(AuditWrapper(command, self.registry.system_log))
