from .airport_profile import AirportProfile
from .helpers import compile_keyword_pattern
from .new import New, Load

__all__ = ["AirportProfile", "compile_keyword_pattern", "New", "Load"]
