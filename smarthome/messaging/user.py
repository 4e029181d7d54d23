from __future__ import annotations
from typing import List, Optional, Tuple, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from .router import ChatMessage, MessageRouter


class User:
    """A household member who talks to others through a `MessageRouter`."""

    def __init__(self, name: str):
        self.name = name
        self.router: Optional[MessageRouter] = None
        self.inbox: List[Tuple[str, str]] = []          # (sender, text)
        self.log = logging.getLogger(self.__class__.__name__)

    def send_message(self, to: str, message: str) -> Optional[ChatMessage]:
        if self.router is None:
            self.log.warning("%s is not registered with a router, message dropped", self.name)
            return None
        return self.router.send_message(self, to, message)

    def receive_message(self, sender: str, message: str) -> None:
        self.inbox.append((sender, message))
        if self.router is not None:
            self.router.display_message(sender, message, self.name)

    def __repr__(self) -> str:
        return f"User({self.name!r})"
