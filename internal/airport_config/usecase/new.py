from typing import Optional

from pkg.logger.logger import Logger
from internal.airport_config.constant import DEFAULT_CONFIG_PATH
from internal.airport_config.type import AirportConfig
from .airport_profile import AirportProfile
from .helpers import load_file, parse_config


def New(config: AirportConfig, logger: Optional[Logger] = None) -> AirportProfile:
    """Create an AirportProfile from an already parsed config.

    Raises:
        ValueError: If config is not an AirportConfig
    """
    if not isinstance(config, AirportConfig):
        raise ValueError("config must be an instance of AirportConfig")

    return AirportProfile(config, logger)


def Load(path: str = DEFAULT_CONFIG_PATH, logger: Optional[Logger] = None) -> AirportProfile:
    """Read a .yaml/.yml/.json airport file and build an AirportProfile.

    Raises:
        ErrConfigNotFound: If the file does not exist
        ErrInvalidConfig: If the file cannot be parsed
    """
    return New(parse_config(load_file(path)), logger)


__all__ = ["New", "Load"]
