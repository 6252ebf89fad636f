#
#
#

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

TOKEN_ENV = 'HETZNER_API_ACCESS_TOKEN'
ZONE_ID_ENV = 'HETZNER_ZONE_ID'
LOG_LEVEL_ENV = 'HETZNER_LOG_LEVEL'


@dataclass(frozen=True)
class Settings:
    token: str
    zone_id: Optional[str] = None
    log_level: str = 'INFO'

    def __repr__(self):
        return (
            f'Settings(token=***, zone_id={self.zone_id!r}, '
            f'log_level={self.log_level!r})'
        )


def load_settings(env_path: Optional[str] = None) -> Settings:
    """Read settings from the environment, after loading a ``.env`` file.

    Without ``env_path`` the nearest ``.env`` at or above the working
    directory is used. Variables already present in the environment win
    over the file. A missing ``.env`` file is silently ignored; a missing
    token or an unknown log level is not.
    """
    load_dotenv(dotenv_path=env_path or find_dotenv(usecwd=True))
    token = os.getenv(TOKEN_ENV) or ''
    if not token:
        raise ValueError(f'{TOKEN_ENV} must be set')
    log_level = (os.getenv(LOG_LEVEL_ENV) or 'INFO').upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f'{LOG_LEVEL_ENV}: unknown level {log_level!r}')
    return Settings(
        token=token,
        zone_id=os.getenv(ZONE_ID_ENV) or None,
        log_level=log_level,
    )
