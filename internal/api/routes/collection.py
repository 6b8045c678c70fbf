"""Collection API route: run one agent on demand."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from internal.collection import ICollectionUseCase
from ..dependencies import get_collection
from ..schemas import CollectDataRequest, FailureResponse

router = APIRouter()


@router.post(
    "/collect-data",
    responses={400: {"model": FailureResponse}, 502: {"description": "Provider failed"}},
)
async def collect_data(
    body: CollectDataRequest,
    collection: ICollectionUseCase = Depends(get_collection),
):
    """Collect, store and index events from one source.

    Unknown sources and missing credentials surface as 400 through the
    exception handlers; a failing provider returns 502 with ``error`` set.
    """
    result = await collection.collect(
        body.source.strip().lower(),
        credentials=body.credentials,
        query=body.query,
    )
    status_code = 200 if result.success else 502
    return JSONResponse(status_code=status_code, content=result.to_dict())
