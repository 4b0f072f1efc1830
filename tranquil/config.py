"""
Centralized configuration for every threshold table, window, and weight.

All tables are ordered tuples evaluated top-to-bottom with first-match-wins
semantics, so tie-break order is visible here rather than buried in
nested conditionals.
"""

from dataclasses import dataclass, field


COMPARATORS = ("<", "<=", ">", ">=", "==")
RISK_LEVELS = ("low", "moderate", "high", "critical")


def _check_op(op: str) -> None:
    if op not in COMPARATORS:
        raise ValueError(f"Unknown comparison operator {op!r}, expected one of {COMPARATORS}")


# ---------------------------------------------------------------------------
# Stress prediction
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Band:
    """Awards `points` when `<input> <op> value` holds."""

    op: str
    value: float
    points: int

    def __post_init__(self):
        _check_op(self.op)


@dataclass(frozen=True)
class FactorBands:
    """Mutually exclusive bands for one lifestyle input, most severe first."""

    field: str
    default: float
    bands: tuple


# Band edges are exclusive: caffeine 2, alcohol 1, screen 6 and work 8 score 0.
DEFAULT_FACTOR_BANDS: tuple = (
    FactorBands("sleep_hours", 8, (
        Band("<", 6, 40),
        Band("<", 7, 25),
        Band(">", 9, 15),
    )),
    FactorBands("work_hours", 8, (
        Band(">", 10, 30),
        Band(">", 9, 20),
        Band(">", 8, 10),
    )),
    FactorBands("exercise_minutes", 0, (
        Band("==", 0, 20),
        Band("<", 30, 10),
    )),
    FactorBands("social_interaction", 5, (
        Band("<", 3, 25),
        Band("<", 5, 15),
    )),
    FactorBands("screen_time", 4, (
        Band(">", 8, 15),
        Band(">", 6, 10),
    )),
    FactorBands("caffeine", 1, (
        Band(">", 3, 10),
        Band(">", 2, 5),
    )),
    FactorBands("alcohol", 0, (
        Band(">", 2, 10),
        Band(">", 1, 5),
    )),
)


@dataclass(frozen=True)
class PredictorParams:
    """Raw points are divided by `divisor`, rounded, then clamped."""

    factors: tuple = DEFAULT_FACTOR_BANDS
    divisor: float = 15.0
    min_score: int = 1
    max_score: int = 10

    def __post_init__(self):
        if self.divisor <= 0:
            raise ValueError(f"Predictor divisor must be positive, got {self.divisor}")
        if self.min_score > self.max_score:
            raise ValueError(
                f"min_score ({self.min_score}) exceeds max_score ({self.max_score})"
            )


# ---------------------------------------------------------------------------
# Pattern detection
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TriggerRule:
    """Label a trigger when the high-stress mean of `field` satisfies op/value."""

    field: str
    op: str
    value: float
    label: str

    def __post_init__(self):
        _check_op(self.op)


DEFAULT_TRIGGER_RULES: tuple = (
    TriggerRule("work_hours", ">", 9, "Long work hours"),
    TriggerRule("sleep_hours", "<", 6.5, "Poor sleep quality"),
    TriggerRule("exercise_minutes", "<", 30, "Lack of physical activity"),
)


@dataclass(frozen=True)
class PatternParams:
    """Thresholds for gap-based weekly bucketing and trend detection."""

    min_samples: int = 7
    bucket_days: int = 7
    min_buckets: int = 3
    slope_threshold: float = 0.5
    high_stress_level: int = 7

    # Emitted as-is on every detected pattern
    pattern_type: str = "weekly"
    frequency: int = 5
    duration: int = 7

    trigger_rules: tuple = DEFAULT_TRIGGER_RULES


# ---------------------------------------------------------------------------
# Risk assessment
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RiskTier:
    """One scoring tier: points plus the factor and recommendation it contributes."""

    op: str
    value: float
    points: int
    factor: str
    recommendation: str

    def __post_init__(self):
        _check_op(self.op)


@dataclass(frozen=True)
class RiskFactorRule:
    """Tier-exclusive rule over one metric of the recent window."""

    metric: str
    tiers: tuple


DEFAULT_RISK_RULES: tuple = (
    RiskFactorRule("mean_stress", (
        RiskTier(">=", 8, 40,
                 "Consistently high stress levels",
                 "Practice stress reduction techniques daily"),
        RiskTier(">=", 6, 20,
                 "Elevated stress levels",
                 "Implement regular stress management activities"),
    )),
    RiskFactorRule("mean_mood", (
        RiskTier("<=", 3, 35,
                 "Persistently low mood",
                 "Consider mood-boosting activities and social connections"),
        RiskTier("<=", 5, 20,
                 "Below-average mood",
                 "Focus on activities that bring joy and fulfillment"),
    )),
    RiskFactorRule("mean_sleep", (
        RiskTier("<", 6, 25,
                 "Insufficient sleep",
                 "Prioritize sleep hygiene and consistent sleep schedule"),
    )),
    RiskFactorRule("high_intensity_patterns", (
        RiskTier(">", 0, 30,
                 "Detected high-intensity stress patterns",
                 "Work on identifying and managing stress triggers"),
    )),
)


@dataclass(frozen=True)
class RiskLevelTier:
    """Score floor for a risk level and the message prepended to recommendations."""

    level: str
    min_score: int
    recommendation: str
    needs_professional_help: bool = False

    def __post_init__(self):
        if self.level not in RISK_LEVELS:
            raise ValueError(f"Unknown risk level {self.level!r}, expected one of {RISK_LEVELS}")


DEFAULT_RISK_LEVELS: tuple = (
    RiskLevelTier(
        "critical", 80,
        "URGENT: Please consider seeking immediate professional mental health support",
        needs_professional_help=True,
    ),
    RiskLevelTier(
        "high", 60,
        "Consider speaking with a mental health professional",
        needs_professional_help=True,
    ),
    RiskLevelTier(
        "moderate", 30,
        "Monitor your mental health closely and consider preventive measures",
    ),
    RiskLevelTier(
        "low", 0,
        "Continue maintaining good mental health practices",
    ),
)


@dataclass(frozen=True)
class RiskParams:
    """Recent window, scoring rules, and level tiers (highest floor first)."""

    recent_window: int = 7
    pattern_intensity: int = 7
    rules: tuple = DEFAULT_RISK_RULES
    levels: tuple = DEFAULT_RISK_LEVELS
    empty_history_recommendation: str = (
        "Please complete daily assessments for accurate risk evaluation"
    )

    def __post_init__(self):
        floors = [tier.min_score for tier in self.levels]
        if not floors:
            raise ValueError("At least one risk level tier is required")
        if floors != sorted(floors, reverse=True):
            raise ValueError(f"Risk level floors must be descending, got {floors}")


# ---------------------------------------------------------------------------
# Progress metrics
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProgressParams:
    """
    Windows and weights for the overall wellness index [0, 100].

    Wellness = (scale - stress)/scale * w_stress + mood/scale * w_mood
               + sleep_quality * w_sleep + intervention_success * w_intervention
    """

    recent_window: int = 14
    scale_max: float = 10.0
    sleep_hours_scale: float = 10.0
    intervention_success: float = 0.75

    weight_stress: float = 30.0
    weight_mood: float = 30.0
    weight_sleep: float = 25.0
    weight_intervention: float = 15.0

    wellness_max: float = 100.0


# ---------------------------------------------------------------------------
# Top-level config aggregate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TranquilConfig:
    """Complete engine configuration. Pass to any service to override defaults."""

    predictor: PredictorParams = field(default_factory=PredictorParams)
    patterns: PatternParams = field(default_factory=PatternParams)
    risk: RiskParams = field(default_factory=RiskParams)
    progress: ProgressParams = field(default_factory=ProgressParams)
