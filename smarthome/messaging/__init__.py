"""Household messaging."""

from .user import User
from .router import MessageRouter, ChatMessage

__all__ = ['User', 'MessageRouter', 'ChatMessage']
