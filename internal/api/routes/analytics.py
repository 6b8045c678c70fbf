"""Dashboard analytics API routes."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from internal.social_event import ISocialEventUseCase
from ..dependencies import get_events

router = APIRouter()


@router.get("/analytics/metrics")
async def get_metrics(events: ISocialEventUseCase = Depends(get_events)) -> Dict[str, Any]:
    """Totals, sentiment counts and platform/airline distributions."""
    stats = await events.get_data_stats()
    return stats.to_dict()


@router.get("/analytics/charts")
async def get_charts(events: ISocialEventUseCase = Depends(get_events)) -> Dict[str, Any]:
    """Daily engagement, sentiment slices and per-platform volume."""
    charts = await events.get_chart_data()
    return charts.to_dict()
