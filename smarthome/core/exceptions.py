"""
Centralised exception definitions for the smart home controller.
All custom exceptions should inherit from SmartHomeError.

Runtime operations (device transitions, commands, messaging) never raise these;
they report refusals and misses through their result strings instead.
"""

class SmartHomeError(Exception):
    """Base class for every custom exception thrown by this project."""

class ConfigurationError(SmartHomeError):
    """Raised when configuration files or environment variables are invalid."""

class DuplicateNameError(SmartHomeError):
    """Raised when a device or user is registered under a name already taken."""

class UnknownStrategyError(SmartHomeError):
    """Raised when a heating strategy is requested that was never registered."""
