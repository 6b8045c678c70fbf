from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from .type import InsightReport


@runtime_checkable
class IInsightUseCase(Protocol):
    async def get_insights(self, refresh: bool = False) -> InsightReport:
        """Cached report, regenerated when missing or ``refresh`` is set."""
        ...

    async def refresh(self) -> InsightReport:
        """Regenerate and overwrite the cached report."""
        ...

    async def generate(self, now: Optional[datetime] = None) -> InsightReport:
        ...


__all__ = ["IInsightUseCase"]
