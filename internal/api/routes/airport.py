"""Airport configuration API route."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from internal.airport_config import AirportProfile
from ..dependencies import get_airport

router = APIRouter()


@router.get("/airport-config")
async def get_airport_config(airport: AirportProfile = Depends(get_airport)) -> Dict[str, Any]:
    return airport.to_dict()
