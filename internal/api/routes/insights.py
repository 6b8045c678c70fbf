"""Insights API route."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from internal.insight import IInsightUseCase
from ..dependencies import get_insight

router = APIRouter()


@router.get("/insights")
async def get_insights(
    refresh: bool = Query(default=False, description="Regenerate instead of reading the cache"),
    insight: IInsightUseCase = Depends(get_insight),
) -> Dict[str, Any]:
    report = await insight.get_insights(refresh=refresh)
    return {"success": True, **report.to_dict()}
