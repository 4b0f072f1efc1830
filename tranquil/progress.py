"""
Progress metrics: recent-vs-older stress and mood movement, sleep quality,
and a 0–100 overall wellness index.
"""

import logging
from typing import Iterable, Optional

from tranquil.config import TranquilConfig
from tranquil.models import ProgressMetrics
from tranquil.rules import clamp
from tranquil.signals import column_means, to_frame

logger = logging.getLogger(__name__)

_COLUMNS = ("stress_level", "mood_level", "sleep_hours")


def compute_progress_metrics(
    history: Iterable,
    cfg: Optional[TranquilConfig] = None,
) -> ProgressMetrics:
    """
    Compare the most recent window with the window before it.

    Positive stress_trend and mood_trend both mean improvement. An empty
    older window averages to zero.
    """
    if cfg is None:
        cfg = TranquilConfig()
    pp = cfg.progress

    df = to_frame(history)
    if df.empty:
        return ProgressMetrics()

    w = pp.recent_window
    recent = column_means(df.iloc[-w:], _COLUMNS)
    older = column_means(df.iloc[-2 * w:-w], _COLUMNS)

    sleep_quality = recent["sleep_hours"] / pp.sleep_hours_scale
    wellness = (
        (pp.scale_max - recent["stress_level"]) / pp.scale_max * pp.weight_stress
        + recent["mood_level"] / pp.scale_max * pp.weight_mood
        + sleep_quality * pp.weight_sleep
        + pp.intervention_success * pp.weight_intervention
    )

    metrics = ProgressMetrics(
        stress_trend=older["stress_level"] - recent["stress_level"],
        mood_trend=recent["mood_level"] - older["mood_level"],
        sleep_quality=sleep_quality,
        intervention_success=pp.intervention_success,
        overall_wellness=clamp(wellness, 0.0, pp.wellness_max),
    )
    logger.debug("Progress metrics: %s", metrics)
    return metrics
