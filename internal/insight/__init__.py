"""Insight Domain: rule-based actionable insights from recent social events."""

from .interface import IInsightUseCase
from .type import (
    Analysis,
    Config,
    Flag,
    GroupStats,
    Insight,
    InsightReport,
    PlatformStats,
    SentimentTrend,
)
from .usecase import InsightUseCase, New

__all__ = [
    "IInsightUseCase",
    "Analysis",
    "Config",
    "Flag",
    "GroupStats",
    "Insight",
    "InsightReport",
    "PlatformStats",
    "SentimentTrend",
    "InsightUseCase",
    "New",
]
