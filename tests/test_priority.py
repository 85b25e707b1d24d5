"""Tests for the guaranteed-minimum priority allocator."""

import pytest

from energy_optimizer.optimization import allocate_priority, priority_weights
from conftest import make_devices


def test_feasible_surplus_split_by_rank(twin_devices):
    result = allocate_priority(twin_devices, 10.0, 2.0)

    # 4 kWh reserved, 6 kWh surplus split 2:1 in hours
    assert result.for_device("a").runtime_hours == pytest.approx(6.0)
    assert result.for_device("b").runtime_hours == pytest.approx(4.0)
    assert result.simultaneous_runtime_hours == pytest.approx(4.0)
    assert result.optimized_runtime_hours == pytest.approx(6.0)
    assert result.total_runtime_hours == pytest.approx(6.0)
    assert result.optimized_device_hours == pytest.approx(10.0)
    assert result.simultaneous_device_hours == pytest.approx(8.0)
    assert result.efficiency_gain_percent == 0.0


def test_explicit_priority_order_flips_outcome(twin_devices):
    result = allocate_priority(twin_devices, 10.0, 2.0, ["b", "a"])
    assert result.for_device("b").runtime_hours == pytest.approx(6.0)
    assert result.for_device("a").runtime_hours == pytest.approx(4.0)


def test_infeasible_minimum_scales_everyone(twin_devices):
    result = allocate_priority(twin_devices, 4.0, 10.0)

    runtimes = [a.runtime_hours for a in result.per_device]
    assert runtimes == pytest.approx([2.0, 2.0])
    assert result.total_allocated_kwh == pytest.approx(4.0)
    assert result.simultaneous_runtime_hours == pytest.approx(2.0)
    assert result.total_runtime_hours == pytest.approx(2.0)


def test_infeasible_scaling_is_proportional_to_demand():
    devices = make_devices(1.0, 3.0)
    result = allocate_priority(devices, 2.0, 1.0)

    assert result.for_device("a").allocated_energy_kwh == pytest.approx(0.5)
    assert result.for_device("b").allocated_energy_kwh == pytest.approx(1.5)
    assert result.for_device("a").runtime_hours == pytest.approx(0.5)
    assert result.for_device("b").runtime_hours == pytest.approx(0.5)


@pytest.mark.parametrize(
    "powers, energy, minimum",
    [
        ((1.0, 2.0, 0.5), 20.0, 3.0),
        ((0.2, 0.2, 0.2, 0.2), 5.0, 1.0),
        ((2.5, 0.1), 9.0, 2.0),
        ((1.0, 1.0), 4.0, 2.0),
    ],
)
def test_feasible_floor_and_conservation(powers, energy, minimum):
    result = allocate_priority(make_devices(*powers), energy, minimum)

    assert result.total_allocated_kwh == pytest.approx(energy)
    for row in result.per_device:
        assert row.runtime_hours >= minimum - 1e-9


def test_earlier_priority_never_runs_shorter_with_equal_draw():
    devices = make_devices(0.5, 0.5, 0.5, 0.5)
    order = ["c", "a", "d", "b"]
    result = allocate_priority(devices, 12.0, 2.0, order)

    runtimes = [result.for_device(dev_id).runtime_hours for dev_id in order]
    assert runtimes == sorted(runtimes, reverse=True)


def test_extra_hours_scale_with_weight_not_draw():
    devices = make_devices(2.0, 0.5)
    result = allocate_priority(devices, 10.0, 1.0)

    extra_a = result.for_device("a").runtime_hours - 1.0
    extra_b = result.for_device("b").runtime_hours - 1.0
    assert extra_a / extra_b == pytest.approx(2.0)


def test_zero_minimum_hands_out_everything_by_rank(twin_devices):
    result = allocate_priority(twin_devices, 3.0, 0.0)
    assert result.for_device("a").runtime_hours == pytest.approx(2.0)
    assert result.for_device("b").runtime_hours == pytest.approx(1.0)


def test_inactive_devices_are_not_weighted():
    devices = make_devices(1.0, 1.0, 1.0, inactive=("a",))
    result = allocate_priority(devices, 5.0, 1.0, ["a", "c", "b"])

    assert [row.device_id for row in result.per_device] == ["b", "c"]
    # surplus 3 kWh split 2:1 in favour of c
    assert result.for_device("c").runtime_hours == pytest.approx(3.0)
    assert result.for_device("b").runtime_hours == pytest.approx(2.0)


def test_zero_power_device_gets_time_without_energy():
    devices = make_devices(0.0, 1.0)
    result = allocate_priority(devices, 3.0, 1.0)

    assert result.total_allocated_kwh == pytest.approx(3.0)
    assert result.for_device("a").allocated_energy_kwh == pytest.approx(0.0, abs=1e-9)
    assert result.for_device("b").runtime_hours == pytest.approx(3.0)


def test_zero_power_device_keeps_floor_with_small_surplus():
    devices = make_devices(0.0, 1.0)
    result = allocate_priority(devices, 1.1, 1.0)

    assert result.for_device("a").runtime_hours >= 1.0 - 1e-9
    assert result.for_device("b").runtime_hours >= 1.0 - 1e-9
    assert result.simultaneous_runtime_hours >= 1.0 - 1e-9
    assert result.total_allocated_kwh == pytest.approx(1.1)
    assert result.for_device("a").allocated_energy_kwh == pytest.approx(0.0, abs=1e-9)


def test_zero_power_device_scaled_with_the_rest_when_short():
    devices = make_devices(0.0, 1.0)
    result = allocate_priority(devices, 0.5, 1.0)

    assert [row.runtime_hours for row in result.per_device] == pytest.approx([0.5, 0.5])
    assert result.simultaneous_runtime_hours == pytest.approx(0.5)
    assert result.total_allocated_kwh == pytest.approx(0.5)


@pytest.mark.parametrize(
    "energy, minimum",
    [(0.0, 1.0), (-2.0, 1.0), (10.0, -1.0)],
)
def test_degenerate_inputs_give_zero_result(twin_devices, energy, minimum):
    assert allocate_priority(twin_devices, energy, minimum).is_empty


def test_no_active_devices():
    assert allocate_priority(make_devices(1.0, inactive=("a",)), 10.0, 1.0).is_empty


def test_weights_default_to_listing_order():
    devices = make_devices(1.0, 1.0, 1.0)
    assert priority_weights(devices) == {"a": 3, "b": 2, "c": 1}


def test_weights_drop_unknown_and_repeated_ids():
    devices = make_devices(1.0, 1.0, 1.0)
    weights = priority_weights(devices, ["c", "zz", "c"])
    assert weights == {"c": 3, "a": 2, "b": 1}
