from typing import Optional
from config.app_config import settings
from .base_strategy import HeatingStrategy


class EcoMode(HeatingStrategy):
    """Energy-saving heating to a low target"""

    mode_name = "eco"

    def __init__(self, target_temperature: Optional[int] = None):
        super().__init__(settings.ECO_TARGET if target_temperature is None else target_temperature)

    def heat(self) -> str:
        return f"Eco mode: Heating to {self.target_temperature}C"


class ComfortMode(HeatingStrategy):
    """Full heating to a comfortable target"""

    mode_name = "comfort"

    def __init__(self, target_temperature: Optional[int] = None):
        super().__init__(settings.COMFORT_TARGET if target_temperature is None else target_temperature)

    def heat(self) -> str:
        return f"Comfort mode: Heating to {self.target_temperature}C"
