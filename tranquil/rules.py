"""
Declarative rule evaluation shared by the predictor, detector and assessor.

Tables live in config; this module only knows how to walk them.
"""

import math
import operator
from typing import Iterable, Optional

OPERATORS = {
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "==": operator.eq,
}


def matches(value: float, op: str, threshold: float) -> bool:
    return OPERATORS[op](value, threshold)


def first_match(value: float, tiers: Iterable):
    """
    Return the first tier whose (op, value) condition holds, or None.

    Tiers are ordered most severe first, so at most one applies per factor.
    """
    for tier in tiers:
        if matches(value, tier.op, tier.value):
            return tier
    return None


def band_points(value: float, bands: Iterable) -> int:
    band = first_match(value, bands)
    return band.points if band is not None else 0


def round_half_up(x: float) -> int:
    """Round .5 away from -inf (2.5 -> 3), unlike Python's banker's rounding."""
    return int(math.floor(x + 0.5))


def clamp(x: float, low: float, high: float) -> float:
    return max(low, min(high, x))


def fired_labels(means, rules: Iterable) -> list:
    """Labels of every rule whose field mean satisfies its condition, in rule order."""
    labels = []
    for rule in rules:
        mean: Optional[float] = means.get(rule.field)
        if mean is not None and matches(mean, rule.op, rule.value):
            labels.append(rule.label)
    return labels
