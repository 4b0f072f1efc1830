"""
Pattern detection: rising weekly stress trend and its likely triggers.

The history is cut into gap-based weekly buckets, a least-squares line is
fit through the bucket averages, and a single "weekly" pattern is emitted
when the slope is steep enough. Each call recomputes from scratch.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import pandas as pd

from tranquil.clock import SystemClock
from tranquil.config import TranquilConfig
from tranquil.models import StressPattern
from tranquil.rules import fired_labels, round_half_up
from tranquil.signals import column_means, ols_slope, to_frame, weekly_averages

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Trigger inference
# ---------------------------------------------------------------------------

def identify_triggers(df: pd.DataFrame, cfg: TranquilConfig) -> List[str]:
    """
    Label lifestyle factors whose mean over high-stress days crosses a rule.

    High-stress days are those with stress_level >= the configured level.
    No such days → no triggers.
    """
    pp = cfg.patterns
    high = df[df["stress_level"] >= pp.high_stress_level]
    if high.empty:
        return []

    fields = [rule.field for rule in pp.trigger_rules]
    means = column_means(high, fields)
    return fired_labels(means, pp.trigger_rules)


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------

def detect_patterns(
    history: Iterable,
    cfg: Optional[TranquilConfig] = None,
    clock: Optional[SystemClock] = None,
) -> List[StressPattern]:
    """
    Return zero or one StressPattern for the given history.

    Empty result when there are fewer than `min_samples` samples, fewer
    than `min_buckets` weekly buckets, or the trend slope is not above the
    threshold.
    """
    if cfg is None:
        cfg = TranquilConfig()
    if clock is None:
        clock = SystemClock()
    pp = cfg.patterns

    df = to_frame(history)
    if len(df) < pp.min_samples:
        logger.debug("Pattern detection skipped: %d samples < %d", len(df), pp.min_samples)
        return []

    averages = weekly_averages(df, pp.bucket_days)
    if len(averages) < pp.min_buckets:
        logger.debug("Pattern detection skipped: %d weekly buckets < %d",
                     len(averages), pp.min_buckets)
        return []

    slope = ols_slope(averages)
    if slope <= pp.slope_threshold:
        logger.debug("No rising weekly trend (slope %.4f)", slope)
        return []

    detected_at = clock.now()
    pattern = StressPattern(
        pattern_type=pp.pattern_type,
        triggers=tuple(identify_triggers(df, cfg)),
        intensity=round_half_up(averages[-1]),
        frequency=pp.frequency,
        duration=pp.duration,
        detected_at=detected_at,
        id=clock.new_id("pattern", detected_at),
        user_id=df["user_id"].iloc[0],
    )
    logger.debug("Weekly stress pattern detected (slope %.4f, intensity %d, triggers %s)",
                 slope, pattern.intensity, list(pattern.triggers))
    return [pattern]


@dataclass(frozen=True)
class PatternDetector:
    """Stateless detector bound to a configuration and clock."""

    cfg: TranquilConfig = field(default_factory=TranquilConfig)
    clock: SystemClock = field(default_factory=SystemClock)

    def detect(self, history: Iterable) -> List[StressPattern]:
        return detect_patterns(history, self.cfg, self.clock)
