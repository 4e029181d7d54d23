"""Heating strategies, factory and the sensor-driven heating system."""

from .base_strategy import HeatingStrategy
from .modes import EcoMode, ComfortMode
from .strategy_factory import HeatingStrategyFactory
from .heating_system import HeatingSystem

__all__ = [
    'HeatingStrategy',
    'EcoMode',
    'ComfortMode',
    'HeatingStrategyFactory',
    'HeatingSystem'
]
