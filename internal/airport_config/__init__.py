"""Airport configuration domain: keyword sets, query terms and templates."""

from .interface import IAirportProfile
from .type import AirportConfig, AirportInfo, Airline, UITemplates, DataCollection, SecurityRules
from .errors import ErrConfigNotFound, ErrInvalidConfig
from .usecase import AirportProfile, compile_keyword_pattern, New, Load

__all__ = [
    "IAirportProfile",
    "AirportConfig",
    "AirportInfo",
    "Airline",
    "UITemplates",
    "DataCollection",
    "SecurityRules",
    "ErrConfigNotFound",
    "ErrInvalidConfig",
    "AirportProfile",
    "compile_keyword_pattern",
    "New",
    "Load",
]
