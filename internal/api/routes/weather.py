"""Weather documents API route."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Path, Query

from internal.document import IDocumentUseCase
from ..dependencies import get_documents
from ..schemas import FailureResponse

router = APIRouter()


@router.get("/weather/{kind}", responses={404: {"model": FailureResponse}})
async def list_weather(
    kind: str = Path(description="forecast, alerts or correlation"),
    limit: int = Query(default=50, ge=1, le=500),
    documents: IDocumentUseCase = Depends(get_documents),
) -> List[Dict[str, Any]]:
    return [d.to_dict() for d in await documents.list_weather(kind, limit=limit)]
