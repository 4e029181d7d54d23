"""
Append-only activity streams.

The controller produces two categorised streams of timestamped text lines:
``system`` (device and scenario activity) and ``chat`` (message traffic).
Whatever renders them (console, UI pane, file) reads from an ``ActivityLog``;
each entry is also mirrored to the stdlib logger ``smarthome.<channel>``.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional

SYSTEM_CHANNEL = "system"
CHAT_CHANNEL = "chat"


@dataclass(frozen=True)
class LogEntry:
    """One line of an activity stream."""
    timestamp: datetime
    message: str

    def render(self) -> str:
        return f"[{self.timestamp.strftime('%H:%M:%S')}] {self.message}"


class ActivityLog:
    """Timestamped, append-only sequence of messages for a single channel."""

    def __init__(self, channel: str, clock: Optional[Callable[[], datetime]] = None):
        self.channel = channel
        self._clock = clock or datetime.now
        self._entries: List[LogEntry] = []
        self.logger = logging.getLogger(f"smarthome.{channel}")

    def append(self, message: str) -> LogEntry:
        entry = LogEntry(timestamp=self._clock(), message=message)
        self._entries.append(entry)
        self.logger.info(message)
        return entry

    @property
    def entries(self) -> List[LogEntry]:
        return list(self._entries)

    def messages(self) -> List[str]:
        return [entry.message for entry in self._entries]

    def lines(self) -> List[str]:
        return [entry.render() for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)
