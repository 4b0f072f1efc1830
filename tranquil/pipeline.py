"""
Pipeline orchestration: load → detect patterns → assess risk → progress → report.

This is the only module with I/O (file loading, report formatting).
All analytical logic is delegated to predictor, patterns, risk, progress.

Entry points:
    analyze(filepath)        → CLI mode
    analyze_data(records)    → UI / backend mode
    generate_report(result)  → formatted report
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from tranquil.clock import SystemClock
from tranquil.config import TranquilConfig
from tranquil.models import Assessment
from tranquil.patterns import detect_patterns
from tranquil.predictor import predict_stress_level
from tranquil.progress import compute_progress_metrics
from tranquil.risk import assess_risk
from tranquil.signals import as_timestamp

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data loading (CLI mode only)
# ---------------------------------------------------------------------------

def _to_assessments(records: List) -> List[Assessment]:
    return [r if isinstance(r, Assessment) else Assessment.from_dict(r) for r in records]


def load_data(filepath: Union[str, Path]) -> List[Assessment]:
    """Load and validate a JSON array of daily assessments."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    if not data:
        raise ValueError("Data file is empty")
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of assessments, got {type(data).__name__}")

    return _to_assessments(data)


# ---------------------------------------------------------------------------
# Core analysis (NO FILE I/O)
# ---------------------------------------------------------------------------

def analyze_data(
    records: List,
    cfg: Optional[TranquilConfig] = None,
    clock: Optional[SystemClock] = None,
) -> Dict:
    """
    Backend / UI integration entry point.

    Accepts Assessment objects or plain dicts. Patterns are detected first
    and fed into risk assessment. Empty input is valid and produces the
    fixed low-risk assessment.
    """
    if cfg is None:
        cfg = TranquilConfig()
    if clock is None:
        clock = SystemClock()

    history = _to_assessments(records)
    logger.info("Analyzing %d assessments", len(history))

    patterns = detect_patterns(history, cfg, clock)
    risk = assess_risk(history, patterns, cfg, clock)
    progress = compute_progress_metrics(history, cfg)

    predicted = None
    if history:
        latest = sorted(history, key=lambda a: as_timestamp(a.date))[-1]
        predicted = predict_stress_level(latest, cfg)

    logger.info("Analysis complete: risk=%s score=%d patterns=%d",
                risk.risk_level, risk.score, len(patterns))

    return {
        "samples": len(history),
        "predicted_stress": predicted,
        "patterns": [p.to_dict() for p in patterns],
        "risk": risk.to_dict(),
        "progress": progress.to_dict(),
    }


def analyze(
    filepath: Union[str, Path],
    cfg: Optional[TranquilConfig] = None,
    clock: Optional[SystemClock] = None,
) -> Dict:
    """CLI-compatible entry point. Reads a JSON file and runs analysis."""
    return analyze_data(load_data(filepath), cfg, clock)


# ---------------------------------------------------------------------------
# Report generation
# ---------------------------------------------------------------------------

def generate_report(result: Dict) -> str:
    """Format the analysis result as a human-readable text report."""
    risk = result["risk"]
    progress = result["progress"]
    predicted = result["predicted_stress"]

    lines = [
        "TRANQUIL WELLNESS REPORT",
        "=" * 58,
        "",
        f"  Samples             : {result['samples']}",
        f"  Predicted Stress    : {predicted if predicted is not None else 'n/a'} / 10",
        f"  Risk Level          : {risk['risk_level'].upper()} (score: {risk['score']})",
        f"  Professional Help   : {'RECOMMENDED' if risk['needs_professional_help'] else 'No'}",
        f"  Stress Trend        : {progress['stress_trend']:+.2f}",
        f"  Mood Trend          : {progress['mood_trend']:+.2f}",
        f"  Sleep Quality       : {progress['sleep_quality']:.2f}",
        f"  Overall Wellness    : {progress['overall_wellness']:.1f} / 100",
    ]

    if risk["factors"]:
        lines.append("")
        lines.append("  Risk Factors:")
        for factor in risk["factors"]:
            lines.append(f"    - {factor}")

    for pattern in result["patterns"]:
        lines.append("")
        lines.append(
            f"  {pattern['pattern_type'].title()} Pattern Detected "
            f"(intensity {pattern['intensity']}/10, {pattern['frequency']}x per week)"
        )
        for trigger in pattern["triggers"]:
            lines.append(f"    - Trigger: {trigger}")

    lines.append("")
    lines.append("  Recommendations:")
    for i, rec in enumerate(risk["recommendations"], start=1):
        lines.append(f"    {i}. {rec}")

    lines.append("")
    lines.append("=" * 58)
    return "\n".join(lines)
