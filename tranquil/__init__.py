"""
TRANQUIL v1.0 — Rule-Based Stress & Risk Engine

A deterministic engine that analyzes a history of self-reported daily
wellness samples and produces a predicted stress score, recurring stress
patterns, and a risk assessment with recommendations.

Architecture:
    config      — All threshold tables, windows, and weights (single source of truth)
    models      — Assessment input record and engine output value objects
    clock       — Injectable timestamp / id source
    rules       — Ordered first-match-wins rule evaluation
    signals     — Date-ordered frame, gap-based weekly buckets, OLS slope
    predictor   — Lifestyle inputs → 1–10 stress score
    patterns    — Rising weekly stress trend + trigger inference
    risk        — Weighted risk score, level classification, recommendations
    progress    — Recent-vs-older trends and wellness index
    pipeline    — Orchestration: load → detect → assess → report

Every service is stateless and safe for backend/API usage.
"""

from tranquil.clock import FixedClock, SystemClock
from tranquil.config import TranquilConfig
from tranquil.models import Assessment, ProgressMetrics, RiskAssessment, StressPattern
from tranquil.patterns import PatternDetector, detect_patterns
from tranquil.pipeline import analyze, analyze_data, generate_report
from tranquil.predictor import StressPredictor, predict_stress_level
from tranquil.progress import compute_progress_metrics
from tranquil.risk import RiskAssessor, assess_risk

__version__ = "1.0.0"

__all__ = [
    "Assessment",
    "StressPattern",
    "RiskAssessment",
    "ProgressMetrics",
    "TranquilConfig",
    "SystemClock",
    "FixedClock",
    "StressPredictor",
    "PatternDetector",
    "RiskAssessor",
    "predict_stress_level",
    "detect_patterns",
    "assess_risk",
    "compute_progress_metrics",
    "analyze",
    "analyze_data",
    "generate_report",
]
