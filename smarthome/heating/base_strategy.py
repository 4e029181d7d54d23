# smarthome/heating/base_strategy.py
from abc import ABC, abstractmethod
from typing import Any, Dict


class HeatingStrategy(ABC):
    """Abstract base class for all heating strategies"""

    mode_name: str = "base"

    def __init__(self, target_temperature: int):
        self.target_temperature = target_temperature

    @abstractmethod
    def heat(self) -> str:
        """Describe what the heating does under this strategy"""
        pass

    def get_strategy_metadata(self) -> Dict[str, Any]:
        """Return metadata about this strategy"""
        return {
            "mode": self.mode_name,
            "target_temperature": self.target_temperature,
            "strategy_type": self.__class__.__name__
        }
