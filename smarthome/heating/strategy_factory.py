from typing import Dict, List, Type
from smarthome.core.exceptions import UnknownStrategyError
from .base_strategy import HeatingStrategy
from .modes import EcoMode, ComfortMode


class HeatingStrategyFactory:
    """Factory for creating heating strategy instances"""

    _strategy_registry: Dict[str, Type[HeatingStrategy]] = {
        "eco": EcoMode,
        "comfort": ComfortMode,
    }

    @classmethod
    def register_strategy(cls, mode: str, strategy_class: Type[HeatingStrategy]):
        """Register new heating strategy type"""
        cls._strategy_registry[mode] = strategy_class

    @classmethod
    def create(cls, mode: str, **kwargs) -> HeatingStrategy:
        strategy_class = cls._strategy_registry.get(mode)
        if strategy_class is None:
            raise UnknownStrategyError(f"No heating strategy registered for mode: {mode}")
        return strategy_class(**kwargs)

    @classmethod
    def get_available_strategies(cls) -> List[str]:
        """Get list of available strategy modes"""
        return list(cls._strategy_registry.keys())
