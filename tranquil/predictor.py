"""
Stress prediction: maps one day's lifestyle inputs to a 1–10 stress estimate.

Each input contributes points from its highest matching band; the sum is
scaled down and clamped. Pure function that never fails: missing inputs use
the configured defaults and out-of-range values pass through unvalidated.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from tranquil.config import TranquilConfig
from tranquil.rules import band_points, clamp, round_half_up

logger = logging.getLogger(__name__)


def _lookup(sample: Any, name: str) -> Optional[float]:
    if isinstance(sample, Mapping):
        return sample.get(name)
    return getattr(sample, name, None)


def compute_factor_points(sample: Any, cfg: TranquilConfig) -> Dict[str, int]:
    """Points contributed by each configured input, keyed by field name."""
    points = {}
    for factor in cfg.predictor.factors:
        value = _lookup(sample, factor.field)
        if value is None:
            value = factor.default
        points[factor.field] = band_points(value, factor.bands)
    return points


def predict_stress_level(sample: Any, cfg: Optional[TranquilConfig] = None) -> int:
    """
    Predict a 1–10 stress score for a (possibly partial) sample.

    `sample` may be an Assessment or any mapping of field name → value.
    """
    if cfg is None:
        cfg = TranquilConfig()
    p = cfg.predictor

    points = compute_factor_points(sample, cfg)
    raw = sum(points.values())
    score = int(clamp(round_half_up(raw / p.divisor), p.min_score, p.max_score))

    logger.debug("Predicted stress %d from raw points %d (%s)", score, raw, points)
    return score


@dataclass(frozen=True)
class StressPredictor:
    """Stateless predictor bound to a configuration."""

    cfg: TranquilConfig = field(default_factory=TranquilConfig)

    def predict(self, sample: Any) -> int:
        return predict_stress_level(sample, self.cfg)
