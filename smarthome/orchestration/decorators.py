"""
Command decorators.

Each decorator wraps an inner command and satisfies the same `Command`
contract, so they nest freely: `AuditWrapper(AuthorizationWrapper(cmd))`.
"""

import logging
from abc import ABC, abstractmethod
from typing import FrozenSet, Optional, TYPE_CHECKING

from config.app_config import settings
from smarthome.core.activity_log import ActivityLog
from .commands import Command, CommandKind

if TYPE_CHECKING:
    from smarthome.services.registry import HomeRegistry


class CommandDecorator(Command):
    """Forwards identity (`kind`, `refused`, `undo`) to the wrapped command."""

    def __init__(self, inner: Command):
        self.inner = inner
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def kind(self) -> CommandKind:
        return self.inner.kind

    @property
    def refused(self) -> bool:
        return self.inner.refused

    def undo(self) -> str:
        return self.inner.undo()


###############################################################################
# SAFETY RULES ----------------------------------------------------------------
###############################################################################

class SafetyRule(ABC):
    """Predicate over current registry state that can veto certain commands."""

    applies_to: FrozenSet[CommandKind] = frozenset()
    warning: str = "Security Warning: action refused"

    def applies(self, command: Command) -> bool:
        return command.kind in self.applies_to

    @abstractmethod
    def violated(self, registry: "HomeRegistry") -> bool:
        """Return True when the guarded action must not run right now."""
        pass


class LightsOffWhileDoorUnlockedRule(SafetyRule):
    """Lights may not be switched off while the front door is unlocked."""

    applies_to = frozenset({CommandKind.TURN_OFF_LIGHT})
    warning = "Security Warning: Cannot turn off lights while front door is unlocked"

    def __init__(self, door_name: Optional[str] = None):
        self.door_name = door_name or settings.FRONT_DOOR_NAME

    def violated(self, registry: "HomeRegistry") -> bool:
        door = registry.find_device(self.door_name)
        # absent door, or a device with no lock state, never blocks
        return door is not None and getattr(door, "is_locked", True) is False


###############################################################################
# DECORATORS ------------------------------------------------------------------
###############################################################################

class AuthorizationWrapper(CommandDecorator):
    """Refuses the forward action when its safety rule is violated.

    A refusal returns the rule's warning and leaves the device untouched.
    `undo()` always delegates: the rule guards only the forward action.
    """

    def __init__(self, inner: Command, registry: "HomeRegistry",
                 rule: Optional[SafetyRule] = None):
        super().__init__(inner)
        self.registry = registry
        self.rule = rule or LightsOffWhileDoorUnlockedRule()
        self._refused = False

    @property
    def refused(self) -> bool:
        return self._refused or self.inner.refused

    def execute(self) -> str:
        if self.rule.applies(self.inner) and self.rule.violated(self.registry):
            self._refused = True
            self.logger.warning(f"{self.inner.name} refused: {self.rule.warning}")
            return self.rule.warning
        self._refused = False
        return self.inner.execute()


class AuditWrapper(CommandDecorator):
    """Records a line before and after the wrapped command runs."""

    def __init__(self, inner: Command, system_log: ActivityLog):
        super().__init__(inner)
        self.system_log = system_log

    def execute(self) -> str:
        self.system_log.append(f"Executing command: {self.inner.name}")
        result = self.inner.execute()
        self.system_log.append(f"Command result: {result}")
        return result
