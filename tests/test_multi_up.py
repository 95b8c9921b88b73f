import pytest
from plantplan.core import multi_up
from plantplan.core.exceptions import MicronMismatch
from plantplan.core.multi_up import apply_multi_up, ensure_same_micron, optimize_multi_up
from plantplan.core.plant_plan import Order


def two_coils():
    return [Order(size=250, quantity=300, micron=40), Order(size=350, quantity=300, micron=40)]


def test_disabled_keeps_widths():
    plan = optimize_multi_up(two_coils(), 40, 2000, False)
    assert plan.multi_up is False
    assert [c.size for c in plan.coil_breakdown] == [250, 350]
    assert plan.sizer_width == 600


def test_shortest_coil_is_doubled():
    plan = optimize_multi_up(two_coils(), 40, 2000, True)
    first, second = plan.coil_breakdown
    # 350 mm runs 15528 m against 21739 m for 250 mm
    assert (first.size, first.is_multi_up) == (250, False)
    assert (second.size, second.is_multi_up) == (700, True)
    assert second.total_coil_weight == 300
    assert second.meters_required == pytest.approx(300000 / 38.64)
    assert plan.sizer_width == 950
    assert plan.multi_up is True


def test_exactly_one_coil_doubled_and_inputs_untouched():
    orders = [Order(size=300, quantity=100), Order(size=300, quantity=100), Order(size=400, quantity=500)]
    processed = apply_multi_up(orders, 40)
    assert [o.is_multi_up for o in processed] == [True, False, False]
    assert processed[0].size == 600
    assert orders[0].size == 300
    assert not orders[0].is_multi_up


def test_single_order_is_left_alone():
    processed = apply_multi_up([Order(size=300, quantity=100)], 40)
    assert processed[0].size == 300


def test_sizer_override():
    plan = optimize_multi_up(two_coils(), 40, 2000, True, sizer_override=1000)
    assert plan.sizer_width == 1000
    plan = optimize_multi_up(two_coils(), 40, 2000, True, sizer_override=0)
    assert plan.sizer_width == 950


def test_split_run_suggestion():
    plan = optimize_multi_up(two_coils(), 40, 2000, False)
    assert plan.needs_split_run
    split = plan.split_run
    assert split.phase1_meters == pytest.approx(plan.min_meters_required)
    assert split.phase2_meters == pytest.approx(plan.max_meters_required - plan.min_meters_required)
    assert split.phase2_coils == [1]


def test_no_split_suggestion_for_even_run():
    orders = [Order(size=250, quantity=300, micron=40), Order(size=250, quantity=300, micron=40)]
    plan = optimize_multi_up(orders, 40, 2000, False)
    assert plan.needs_split_run is False
    assert plan.split_run is None


def test_mismatched_micron_fails_before_calculation(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("plan should not be computed")

    monkeypatch.setattr(multi_up, "calculate_plant_plan", fail)
    orders = [Order(size=250, quantity=300, micron=40), Order(size=350, quantity=300, micron=45)]
    with pytest.raises(MicronMismatch) as exc_info:
        optimize_multi_up(orders, 40, 2000, True)
    assert exc_info.value.microns == [40, 45]


def test_plan_micron_must_match_orders():
    with pytest.raises(MicronMismatch):
        optimize_multi_up(two_coils(), 45, 2000, False)


def test_orders_without_micron_are_not_checked():
    ensure_same_micron([40, None, 40])
    orders = [Order(size=250, quantity=300), Order(size=350, quantity=300)]
    assert optimize_multi_up(orders, 40, 2000, False) is not None


def test_incomplete_input_returns_none():
    assert optimize_multi_up(two_coils(), 40, 0, True) is None
