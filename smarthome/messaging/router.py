"""Routes direct and broadcast messages between registered users."""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import logging

from config.app_config import settings
from smarthome.core.activity_log import ActivityLog
from .user import User


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """One routed message; `recipient` is a user name or the broadcast address."""
    sender: str
    recipient: str
    text: str


class MessageRouter:
    def __init__(self, chat_log: ActivityLog, broadcast_address: Optional[str] = None):
        self.chat_log = chat_log
        self.broadcast_address = broadcast_address or settings.BROADCAST_ADDRESS
        self.users: List[User] = []
        self.history: List[ChatMessage] = []
        self.log = logging.getLogger(self.__class__.__name__)

    def add_user(self, user: User) -> None:
        self.users.append(user)
        user.router = self

    def find_user(self, name: str) -> Optional[User]:
        return next((u for u in self.users if u.name == name), None)

    # --------------------------------------------------------------------- #
    #  Routing
    # --------------------------------------------------------------------- #
    def send_message(self, sender: User, to: str, message: str) -> Optional[ChatMessage]:
        """Deliver `message` and return the recorded entry, or None if dropped.

        Broadcasts reach every registered user except the sender. An unknown
        recipient drops the message silently.
        """
        if to == self.broadcast_address:
            for user in self.users:
                if user.name != sender.name:
                    user.receive_message(sender.name, message)
            return self._record(sender.name, self.broadcast_address, message)

        recipient = self.find_user(to)
        if recipient is None:
            self.log.debug("no recipient named %r, message from %s dropped", to, sender.name)
            return None
        recipient.receive_message(sender.name, message)
        return self._record(sender.name, recipient.name, message)

    def display_message(self, sender: str, message: str, to: str) -> None:
        self.chat_log.append(f"[{sender} -> {to}]: {message}")

    def _record(self, sender: str, to: str, message: str) -> ChatMessage:
        entry = ChatMessage(sender=sender, recipient=to, text=message)
        self.history.append(entry)
        self.display_message(sender, message, to)
        return entry
