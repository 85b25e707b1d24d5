"""Shared fixtures for the battery runtime optimizer tests."""

import pytest

from energy_optimizer.resources import Device, EnergySource


def make_devices(*powers, inactive=()):
    """Devices named a, b, c, ... with the given draws (kW)."""
    names = "abcdefghijklmnopqrstuvwxyz"
    return [
        Device(id=names[i], name=f"Device {names[i].upper()}", power_draw_kw=p, is_active=names[i] not in inactive)
        for i, p in enumerate(powers)
    ]


def make_sources(*capacities):
    return [EnergySource(c) for c in capacities]


@pytest.fixture
def two_devices():
    """1 kW and 2 kW devices."""
    return make_devices(1.0, 2.0)


@pytest.fixture
def twin_devices():
    """Two identical 1 kW devices."""
    return make_devices(1.0, 1.0)


@pytest.fixture
def simple_request_body():
    return {
        "mode": "simple",
        "devices": [
            {"id": "a", "name": "Router", "powerDrawKW": 1.0, "isActive": True},
            {"id": "b", "name": "Server", "powerDrawKW": 1.0, "isActive": True},
            {"id": "c", "name": "Camera", "powerDrawKW": 1.0, "isActive": True},
        ],
        "batteryCapacityKWh": 30.0,
    }


@pytest.fixture
def advanced_request_body():
    return {
        "mode": "advanced",
        "optimizedMode": True,
        "devices": [
            {"id": "a", "name": "Laptop", "powerDrawKW": 1.0, "isActive": True},
            {"id": "b", "name": "Heater", "powerDrawKW": 2.0, "isActive": True},
        ],
        "batteries": [3.0, 1.0],
    }
