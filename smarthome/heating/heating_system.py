from typing import Optional
import logging

from config.app_config import settings
from smarthome.core.activity_log import ActivityLog
from smarthome.core.patterns.observer import DeviceObserver
from smarthome.models.devices import Device, DeviceKind
from .base_strategy import HeatingStrategy
from .strategy_factory import HeatingStrategyFactory


class HeatingSystem(DeviceObserver):
    """Swaps its active heating strategy based on temperature sensor readings.

    Readings below the comfort threshold select ComfortMode and write one
    activation line to the system log; any other reading selects EcoMode
    without logging.
    """

    def __init__(self, system_log: ActivityLog,
                 comfort_threshold: Optional[float] = None,
                 strategy: Optional[HeatingStrategy] = None):
        self.system_log = system_log
        self.comfort_threshold = (settings.COMFORT_THRESHOLD
                                  if comfort_threshold is None else comfort_threshold)
        self.strategy = strategy or HeatingStrategyFactory.create("eco")
        self.logger = logging.getLogger(self.__class__.__name__)

    def set_strategy(self, strategy: HeatingStrategy) -> None:
        self.strategy = strategy

    def heat(self) -> str:
        return self.strategy.heat()

    def watch(self, sensor: Device) -> None:
        sensor.subscribe(self)

    # ------------------------------------------------------------------ #
    #  Observer interface
    # ------------------------------------------------------------------ #
    def on_device_changed(self, device: Device) -> None:
        if device.kind is not DeviceKind.TEMPERATURE_SENSOR:
            return
        if device.temperature < self.comfort_threshold:
            self.set_strategy(HeatingStrategyFactory.create("comfort"))
            self.system_log.append(f"Heating system activated: {self.heat()}")
        else:
            self.set_strategy(HeatingStrategyFactory.create("eco"))
            self.logger.debug(f"{device.name} at {device.temperature}C, eco mode")
