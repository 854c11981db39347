from typing import Optional

from ecotrack.schemas.dashboard import GoalEvaluation, GoalKind


def effective_limit(goal_per_unit: Optional[float], unit_count: int, selected_unit: Optional[str] = None) -> float:
    """
    The water goal is configured per unit. With a single unit selected the
    limit is the goal itself; across all units it scales with the unit count.
    """
    goal_per_unit = goal_per_unit or 0.0
    if selected_unit is not None:
        return goal_per_unit
    return goal_per_unit * unit_count


def evaluate_goal(actual: float, goal: Optional[float], kind: GoalKind = GoalKind.SHARE) -> GoalEvaluation:
    """
    Compare an aggregated value with its goal.

    Share goals are met when the actual reaches the goal; the margin is the
    difference in percentage points and the progress is the share itself,
    capped at 100. Limit goals are met when the actual stays at or below the
    limit; progress is the used fraction of the limit, capped at 100, and the
    margin is the unused fraction. An unset goal counts as 0.
    """
    goal = goal or 0.0

    if kind == GoalKind.SHARE:
        return GoalEvaluation(
            kind=kind,
            target=goal,
            actual=actual,
            met=actual >= goal,
            margin_percent=actual - goal,
            progress=min(actual, 100.0),
        )

    if goal > 0:
        progress = min(actual / goal * 100, 100.0)
        margin = (goal - actual) / goal * 100
    else:
        progress = 0.0
        margin = 0.0

    return GoalEvaluation(
        kind=kind,
        target=goal,
        actual=actual,
        met=actual <= goal,
        margin_percent=margin,
        progress=progress,
    )


def evaluate_water_goal(
    average_monthly_volume: float,
    goal_per_unit: Optional[float],
    unit_count: int,
    selected_unit: Optional[str] = None,
) -> GoalEvaluation:
    limit = effective_limit(goal_per_unit, unit_count, selected_unit)
    return evaluate_goal(average_monthly_volume, limit, GoalKind.LIMIT)
