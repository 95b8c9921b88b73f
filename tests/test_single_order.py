import pytest
from plantplan.core.conversion import CUTTING_DENSITY
from plantplan.core.single_order import (
    EditedField,
    EditedValue,
    calculate_single_order,
    get_allowance,
    get_extra_meter,
)


def weight(value):
    return EditedValue(field=EditedField.weight, value=value)


def test_allowance_and_extra_meter():
    assert get_allowance("St. Seal") == 5
    assert get_allowance("Round") == 15
    assert get_allowance("Printing") == 0
    assert get_allowance("Open") == 0
    assert get_extra_meter("Printing") == 200
    assert get_extra_meter("Roll") == 0


def test_weight_edited_printing_job():
    res = calculate_single_order(300, 50, 400, "Printing", weight(50))
    # 50000 / 42 = 1190.47 m, 990.47 m after the 200 m setup, / 0.4 m = 2476 -> 2500
    assert res.meter == 1190
    assert res.pieces == 2500
    assert res.weight == 50
    assert res.extra_meter == 200


def test_seal_allowance_is_added_to_cut_size():
    res = calculate_single_order(300, 50, 395, "St. Seal", weight(50))
    # effective cut 400 mm, no setup metres: 1190476 / 400 = 2976 -> 3000
    assert res.pieces == 3000
    assert res.allowance == 5


def test_pieces_edited_recomputes_meter_and_weight():
    res = calculate_single_order(300, 50, 400, "Printing", EditedValue(EditedField.pieces, 2500))
    assert res.meter == 1200
    assert res.weight == pytest.approx(50.4)
    assert res.pieces == 2500


def test_meter_edited_recomputes_weight():
    res = calculate_single_order(300, 50, 0, "Roll", EditedValue(EditedField.meter, 1000))
    assert res.weight == pytest.approx(42.0)
    assert res.pieces == 0
    assert res.meter == 1000


def test_meter_below_setup_gives_zero_pieces():
    res = calculate_single_order(300, 50, 400, "Printing", EditedValue(EditedField.meter, 150))
    assert res.pieces == 0


def test_incomplete_input():
    assert calculate_single_order(0, 50, 400, "Printing", weight(50)) is None
    assert calculate_single_order(300, None, 400, "Printing", weight(50)) is None


@pytest.mark.parametrize("size,micron,w", [
    (300, 50, 50), (250, 40, 12.345), (1000, 20, 250), (120, 75, 3.3), (455, 38, 99.9),
])
def test_weight_meter_round_trip(size, micron, w):
    res = calculate_single_order(size, micron, 0, "Roll", weight(w))
    back = calculate_single_order(size, micron, 0, "Roll", EditedValue(EditedField.meter, res.meter))
    one_meter = size * micron * CUTTING_DENSITY / 1000
    # meter is floored, so at most one metre of weight is lost (plus 3 dp rounding)
    assert -0.0005 <= w - back.weight <= one_meter + 0.0005


@pytest.mark.parametrize("job_type", ["Printing", "Roll", "St. Seal", "Round", "Intas"])
@pytest.mark.parametrize("cut", [0, 123, 250.5, 400, 777])
def test_pieces_are_multiples_of_100(job_type, cut):
    for w in (1, 7.7, 50, 133.3, 1000):
        res = calculate_single_order(310, 45, cut, job_type, weight(w))
        assert res.pieces % 100 == 0
        assert res.pieces >= 0


def test_typed_meter_is_kept_as_entered():
    res = calculate_single_order(300, 50, 0, "Roll", EditedValue(EditedField.meter, 1000.5))
    assert res.meter == 1000.5
    assert res.weight == pytest.approx(42.021)
