import pytest

from ecotrack.schemas import GoalKind
from ecotrack.services.goals import effective_limit, evaluate_goal, evaluate_water_goal


def test_share_goal_met_at_equality():
    result = evaluate_goal(40.0, 40.0, GoalKind.SHARE)
    assert result.met
    assert result.margin_percent == 0


def test_share_goal_missed():
    result = evaluate_goal(35.0, 40.0)
    assert not result.met
    assert result.margin_percent == pytest.approx(-5.0)
    assert result.progress == 35.0


def test_share_progress_is_capped():
    assert evaluate_goal(120.0, 40.0).progress == 100.0


def test_unset_goal_counts_as_zero():
    result = evaluate_goal(0.0, None)
    assert result.target == 0
    assert result.met


def test_limit_goal():
    result = evaluate_goal(30.0, 40.0, GoalKind.LIMIT)
    assert result.met
    assert result.progress == pytest.approx(75.0)
    assert result.margin_percent == pytest.approx(25.0)


def test_limit_goal_exceeded():
    result = evaluate_goal(60.0, 40.0, GoalKind.LIMIT)
    assert not result.met
    assert result.progress == 100.0
    assert result.margin_percent == pytest.approx(-50.0)


def test_limit_goal_of_zero():
    result = evaluate_goal(10.0, 0.0, GoalKind.LIMIT)
    assert not result.met
    assert result.progress == 0
    assert result.margin_percent == 0


def test_effective_limit_scales_with_unit_count():
    assert effective_limit(40.0, 4) == 160.0
    assert effective_limit(40.0, 4, selected_unit="Warehouse 6") == 40.0
    assert effective_limit(None, 4) == 0.0


def test_water_goal_uses_effective_limit():
    result = evaluate_water_goal(100.0, 40.0, 4)
    assert result.target == 160.0
    assert result.met

    single = evaluate_water_goal(100.0, 40.0, 4, selected_unit="Warehouse 6")
    assert single.target == 40.0
    assert not single.met
