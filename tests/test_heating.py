"""
Tests for heating strategies and the sensor-driven heating system.
"""

import pytest

from smarthome.core.exceptions import UnknownStrategyError
from smarthome.heating import (
    ComfortMode, EcoMode, HeatingStrategy, HeatingStrategyFactory, HeatingSystem,
)
from smarthome.models.devices import Light, TemperatureSensor


@pytest.fixture
def heating(system_log):
    return HeatingSystem(system_log, comfort_threshold=18)


class TestStrategies:
    def test_descriptions(self):
        assert EcoMode(18).heat() == "Eco mode: Heating to 18C"
        assert ComfortMode(22).heat() == "Comfort mode: Heating to 22C"

    def test_factory(self):
        assert isinstance(HeatingStrategyFactory.create("eco"), EcoMode)
        assert isinstance(HeatingStrategyFactory.create("comfort", target_temperature=21), ComfortMode)
        assert {"eco", "comfort"} <= set(HeatingStrategyFactory.get_available_strategies())

    def test_factory_unknown_mode(self):
        with pytest.raises(UnknownStrategyError):
            HeatingStrategyFactory.create("turbo")

    def test_register_strategy(self):
        class Away(HeatingStrategy):
            mode_name = "away"

            def __init__(self, target_temperature=12):
                super().__init__(target_temperature)

            def heat(self):
                return "Away mode: frost protection"

        HeatingStrategyFactory.register_strategy("away", Away)
        try:
            assert HeatingStrategyFactory.create("away").heat() == "Away mode: frost protection"
        finally:
            HeatingStrategyFactory._strategy_registry.pop("away")

    def test_metadata(self):
        meta = ComfortMode(22).get_strategy_metadata()
        assert meta == {"mode": "comfort", "target_temperature": 22, "strategy_type": "ComfortMode"}


class TestHeatingSystem:
    def test_starts_in_eco(self, heating):
        assert isinstance(heating.strategy, EcoMode)

    def test_cold_reading_selects_comfort_and_logs_once(self, heating, system_log):
        sensor = TemperatureSensor("Hall")
        heating.watch(sensor)

        sensor.set_temperature(16)

        assert isinstance(heating.strategy, ComfortMode)
        assert system_log.messages() == [
            "Heating system activated: Comfort mode: Heating to 22C"
        ]

    def test_warm_reading_selects_eco_silently(self, heating, system_log):
        sensor = TemperatureSensor("Hall")
        heating.watch(sensor)
        sensor.set_temperature(16)

        sensor.set_temperature(20)

        assert isinstance(heating.strategy, EcoMode)
        assert len(system_log) == 1

    def test_threshold_is_exclusive(self, heating, system_log):
        sensor = TemperatureSensor("Hall")
        heating.watch(sensor)
        sensor.set_temperature(18)
        assert isinstance(heating.strategy, EcoMode)
        assert len(system_log) == 0

    def test_heat_uses_active_strategy(self, heating):
        heating.set_strategy(ComfortMode(23))
        assert heating.heat() == "Comfort mode: Heating to 23C"

    def test_ignores_other_devices(self, heating, system_log):
        heating.set_strategy(ComfortMode(22))
        light = Light("Porch")
        light.subscribe(heating)
        light.turn_on()
        assert isinstance(heating.strategy, ComfortMode)
        assert len(system_log) == 0
