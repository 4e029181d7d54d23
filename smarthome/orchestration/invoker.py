from typing import List, Optional, Tuple
import logging

from config.app_config import settings
from .commands import Command

NOTHING_TO_UNDO = "No commands to undo"


class Invoker:
    """Executes commands and keeps an unbounded undo history (a LIFO stack).

    A command whose execution was refused is kept out of the history unless
    `record_refusals` is set; undoing a refusal would apply an inverse for a
    forward action that never ran.
    """

    def __init__(self, record_refusals: Optional[bool] = None):
        self.record_refusals = (settings.RECORD_REFUSED_COMMANDS
                                if record_refusals is None else record_refusals)
        self._history: List[Command] = []
        self.logger = logging.getLogger(self.__class__.__name__)

    def press_button(self, command: Command) -> str:
        result = command.execute()
        if command.refused and not self.record_refusals:
            self.logger.info(f"Refused {command.name} not added to undo history")
        else:
            self._history.append(command)
        return result

    def undo(self) -> str:
        if not self._history:
            return NOTHING_TO_UNDO
        command = self._history.pop()
        self.logger.debug(f"Undoing {command.name} ({len(self._history)} left)")
        return command.undo()

    @property
    def history(self) -> Tuple[Command, ...]:
        """Recorded commands, oldest first."""
        return tuple(self._history)

    @property
    def can_undo(self) -> bool:
        return bool(self._history)
