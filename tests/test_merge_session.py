import pytest
from plantplan.core.exceptions import (
    EmptySelection,
    IncompletePlan,
    InvalidTransition,
    MicronMismatch,
    StaleSelection,
)
from plantplan.core.merge import MergeSession, MergeState
from plantplan.core.plant_plan import Order


ORDERS = [
    Order(size=250, quantity=300, micron=40, order_id=1),
    Order(size=350, quantity=300, micron=40, order_id=2),
    Order(size=300, quantity=200, micron=45, order_id=3),
]


def previewing(*ids):
    session = MergeSession()
    for order_id in ids:
        session.select(order_id)
    session.preview(ORDERS)
    return session


def test_select_returns_new_frozenset():
    session = MergeSession()
    first = session.select(1)
    second = session.select(2)
    assert first == frozenset({1})
    assert second == frozenset({1, 2})
    assert session.deselect(1) == frozenset({2})
    assert first == frozenset({1})


def test_preview_computes_plan():
    session = previewing(1, 2)
    assert session.state == MergeState.PREVIEWING
    assert session.micron == 40
    assert session.roll_length == 2000
    assert session.plan.total_rolls == 11
    assert session.plan.sizer_width == 600


def test_preview_requires_selection():
    with pytest.raises(EmptySelection):
        MergeSession().preview(ORDERS)


def test_preview_rejects_mixed_micron():
    session = MergeSession()
    session.select(1)
    session.select(3)
    with pytest.raises(MicronMismatch):
        session.preview(ORDERS)
    assert session.state == MergeState.SELECTING


def test_preview_reports_missing_orders_as_stale():
    session = MergeSession()
    session.select(1)
    session.select(9)
    with pytest.raises(StaleSelection) as exc_info:
        session.preview(ORDERS)
    assert exc_info.value.order_ids == [9]


def test_edits_only_while_previewing():
    session = MergeSession()
    with pytest.raises(InvalidTransition):
        session.update_preview(sizer=700)
    with pytest.raises(InvalidTransition):
        session.confirm(lambda ids, plan: None)
    with pytest.raises(InvalidTransition):
        session.cancel()


def test_update_preview():
    session = previewing(1, 2)
    assert session.update_preview(sizer=800).sizer_width == 800
    assert session.update_preview(roll_length=4000).roll_length == 4000
    # toggling multi-up drops the manual sizer
    plan = session.update_preview(multi_up=True)
    assert plan.sizer_width == 950
    assert plan.multi_up is True
    assert session.update_preview(sizer=0).sizer_width == 950


def test_selection_locked_while_previewing():
    session = previewing(1, 2)
    with pytest.raises(InvalidTransition):
        session.select(3)


def test_confirm_commits_once():
    session = previewing(1, 2)
    calls = []

    def commit(ids, plan):
        calls.append((ids, plan.total_rolls))
        return "job"

    assert session.confirm(commit) == "job"
    assert calls == [(frozenset({1, 2}), 11)]
    assert session.state == MergeState.CONFIRMED

    with pytest.raises(InvalidTransition):
        session.confirm(commit)
    with pytest.raises(InvalidTransition):
        session.update_preview(multi_up=True)
    with pytest.raises(InvalidTransition):
        session.cancel()
    assert len(calls) == 1


def test_failed_commit_stays_in_preview():
    session = previewing(1, 2)

    def commit(ids, plan):
        raise StaleSelection([2])

    with pytest.raises(StaleSelection):
        session.confirm(commit)
    assert session.state == MergeState.PREVIEWING


def test_confirm_needs_complete_plan():
    session = previewing(1, 2)
    assert session.update_preview(roll_length=0) is None
    with pytest.raises(IncompletePlan):
        session.confirm(lambda ids, plan: None)


def test_cancel_returns_to_selecting():
    session = previewing(1, 2)
    assert session.cancel() == MergeState.CANCELLED
    assert session.state == MergeState.SELECTING
    assert session.plan is None
    assert session.selected == frozenset({1, 2})
    session.deselect(2)
    assert session.preview(ORDERS).total_rolls == 11
