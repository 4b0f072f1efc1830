"""
Risk assessment: additive score over the recent window plus detected
patterns, classified into low / moderate / high / critical.

Scoring and classification are both table-driven (see config). Within a
factor only the first matching tier applies; classification takes the
first level whose floor the score reaches, so order matters.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

import pandas as pd

from tranquil.clock import SystemClock
from tranquil.config import RiskLevelTier, TranquilConfig
from tranquil.models import RiskAssessment, StressPattern
from tranquil.rules import first_match
from tranquil.signals import recent_means, to_frame

logger = logging.getLogger(__name__)

UNKNOWN_USER = "unknown"


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------

def compute_risk_metrics(
    df: pd.DataFrame,
    patterns: Sequence[StressPattern],
    cfg: TranquilConfig,
) -> Dict[str, float]:
    """Recent-window means of the date-ordered frame plus the count of high-intensity patterns."""
    rp = cfg.risk
    means = recent_means(df, ("stress_level", "mood_level", "sleep_hours"), rp.recent_window)
    return {
        "mean_stress": means["stress_level"],
        "mean_mood": means["mood_level"],
        "mean_sleep": means["sleep_hours"],
        "high_intensity_patterns": sum(
            1 for p in patterns if p.intensity >= rp.pattern_intensity
        ),
    }


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def classify_risk(score: int, cfg: TranquilConfig) -> RiskLevelTier:
    """First level (highest floor first) whose floor the score reaches."""
    levels = cfg.risk.levels
    for tier in levels:
        if score >= tier.min_score:
            return tier
    return levels[-1]


# ---------------------------------------------------------------------------
# Assessment
# ---------------------------------------------------------------------------

def assess_risk(
    history: Sequence,
    patterns: Sequence[StressPattern],
    cfg: Optional[TranquilConfig] = None,
    clock: Optional[SystemClock] = None,
) -> RiskAssessment:
    """
    Score the recent window and patterns into a RiskAssessment.

    Empty history yields the fixed low-risk assessment asking the user to
    complete daily assessments.
    """
    if cfg is None:
        cfg = TranquilConfig()
    if clock is None:
        clock = SystemClock()
    rp = cfg.risk

    history = list(history)
    assessed_at = clock.now()
    risk_id = clock.new_id("risk", assessed_at)

    if not history:
        logger.debug("Risk assessment on empty history")
        return RiskAssessment(
            risk_level=classify_risk(0, cfg).level,
            factors=(),
            score=0,
            recommendations=(rp.empty_history_recommendation,),
            needs_professional_help=False,
            assessed_at=assessed_at,
            id=risk_id,
            user_id=UNKNOWN_USER,
        )

    df = to_frame(history)
    metrics = compute_risk_metrics(df, patterns, cfg)

    score = 0
    factors = []
    recommendations = []
    for rule in rp.rules:
        tier = first_match(metrics[rule.metric], rule.tiers)
        if tier is None:
            continue
        score += tier.points
        factors.append(tier.factor)
        recommendations.append(tier.recommendation)

    level = classify_risk(score, cfg)
    recommendations.insert(0, level.recommendation)

    logger.debug("Risk score %d → %s (metrics %s)", score, level.level, metrics)

    return RiskAssessment(
        risk_level=level.level,
        factors=tuple(factors),
        score=score,
        recommendations=tuple(recommendations),
        needs_professional_help=level.needs_professional_help,
        assessed_at=assessed_at,
        id=risk_id,
        user_id=df["user_id"].iloc[0],
    )


@dataclass(frozen=True)
class RiskAssessor:
    """Stateless assessor bound to a configuration and clock."""

    cfg: TranquilConfig = field(default_factory=TranquilConfig)
    clock: SystemClock = field(default_factory=SystemClock)

    def assess(self, history: Sequence, patterns: Sequence[StressPattern]) -> RiskAssessment:
        return assess_risk(history, patterns, self.cfg, self.clock)
