"""
Value objects exchanged with the engine.

Assessment is the caller-owned input record; StressPattern, RiskAssessment
and ProgressMetrics are engine-created outputs. All are immutable.
"""

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Dict, Mapping, Optional, Union

import pandas as pd


REQUIRED_FIELDS = {
    "date", "stress_level", "mood_level", "sleep_hours", "work_hours",
    "exercise_minutes", "social_interaction", "screen_time", "caffeine", "alcohol",
}


def _serialize(record) -> Dict:
    out = asdict(record)
    for key, value in out.items():
        if isinstance(value, (datetime, date)):
            out[key] = value.isoformat()
        elif isinstance(value, tuple):
            out[key] = list(value)
    return out


@dataclass(frozen=True)
class Assessment:
    """One self-reported daily wellness sample."""

    date: Union[date, datetime]
    stress_level: int
    mood_level: int
    sleep_hours: float
    work_hours: float
    exercise_minutes: int
    social_interaction: int
    screen_time: float
    caffeine: int
    alcohol: int
    symptoms: tuple = ()
    notes: str = ""
    id: Optional[str] = None
    user_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "Assessment":
        """Build from a plain mapping; `date` may be ISO text."""
        missing = REQUIRED_FIELDS - set(data)
        if missing:
            raise ValueError(f"Missing required fields: {sorted(missing)}")

        known = {name: data[name] for name in cls.__dataclass_fields__ if name in data}
        known["date"] = pd.to_datetime(data["date"]).to_pydatetime()
        known["symptoms"] = tuple(data.get("symptoms") or ())
        known["notes"] = data.get("notes") or ""
        return cls(**known)

    def to_dict(self) -> Dict:
        return _serialize(self)


@dataclass(frozen=True)
class StressPattern:
    """A recurring stress trend detected across weekly buckets."""

    pattern_type: str
    triggers: tuple
    intensity: int
    frequency: int
    duration: int
    detected_at: datetime
    id: str = ""
    user_id: Optional[str] = None

    def to_dict(self) -> Dict:
        return _serialize(self)


@dataclass(frozen=True)
class RiskAssessment:
    """Aggregated risk with factors and recommendations, most urgent first."""

    risk_level: str
    factors: tuple
    score: int
    recommendations: tuple
    needs_professional_help: bool
    assessed_at: datetime
    id: str = ""
    user_id: Optional[str] = None

    def to_dict(self) -> Dict:
        return _serialize(self)


@dataclass(frozen=True)
class ProgressMetrics:
    """Recent-versus-older trends and the overall wellness index."""

    stress_trend: float = 0.0
    mood_trend: float = 0.0
    sleep_quality: float = 0.0
    intervention_success: float = 0.0
    overall_wellness: float = 0.0

    def to_dict(self) -> Dict:
        return _serialize(self)
