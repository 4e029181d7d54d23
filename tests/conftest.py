"""Shared fixtures: a fresh registry per test, never the environment."""

import pytest

from smarthome.core.activity_log import ActivityLog
from smarthome.core.patterns.observer import DeviceObserver
from smarthome.messaging.user import User
from smarthome.models.devices import Light, Lock, TemperatureSensor
from smarthome.services.registry import HomeRegistry


class RecordingObserver(DeviceObserver):
    """Captures each notification together with the state seen at that moment."""

    def __init__(self):
        self.seen = []

    def on_device_changed(self, device):
        self.seen.append((device, device.status()))


@pytest.fixture
def system_log():
    return ActivityLog("system")


@pytest.fixture
def registry():
    return HomeRegistry()


@pytest.fixture
def light(registry):
    return registry.add_device(Light("Living Room Light"))


@pytest.fixture
def door(registry):
    return registry.add_device(Lock("Front Door"))


@pytest.fixture
def sensor(registry):
    return registry.add_device(TemperatureSensor("Temperature Sensor", temperature=20))


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def family(registry):
    return [registry.add_user(User(name)) for name in ("John", "Mary", "Paul")]
