"""
Settings for drawpoker.
Values come from the process environment first, then a .env file, then defaults.
"""

import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional

from dotenv import dotenv_values

from drawpoker.hand_evaluation import FULL_HOUSE_RULES

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off', ''}


@dataclass(frozen=True)
class Settings:
    seed: Optional[int] = None
    color: bool = False
    art: bool = False
    full_house_rule: str = 'classic'
    log_level: str = 'WARNING'


def load_env_file(filepath: str = ".env") -> Dict[str, str]:
    """Load variables from a .env file. A missing file gives an empty dict."""
    return {key: value for key, value in dotenv_values(filepath).items() if value is not None}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be true or false, got {value!r}")


def get_settings(env_file: str = ".env") -> Settings:
    """Build Settings from the environment and the .env file."""
    env_vars = load_env_file(env_file)

    def lookup(name: str) -> Optional[str]:
        value = os.getenv(name)
        if value is None:
            value = env_vars.get(name)
        return value

    seed = None
    raw_seed = lookup('DRAWPOKER_SEED')
    if raw_seed not in (None, ''):
        try:
            seed = int(raw_seed)
        except ValueError:
            raise ValueError(f"DRAWPOKER_SEED must be an integer, got {raw_seed!r}") from None

    rule = (lookup('DRAWPOKER_FULL_HOUSE_RULE') or 'classic').strip().lower()
    if rule not in FULL_HOUSE_RULES:
        raise ValueError(f"DRAWPOKER_FULL_HOUSE_RULE must be one of {sorted(FULL_HOUSE_RULES)}, got {rule!r}")

    log_level = (lookup('DRAWPOKER_LOG_LEVEL') or 'WARNING').strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"DRAWPOKER_LOG_LEVEL is not a logging level: {log_level!r}")

    return Settings(
        seed=seed,
        color=_parse_bool('DRAWPOKER_COLOR', lookup('DRAWPOKER_COLOR') or 'false'),
        art=_parse_bool('DRAWPOKER_ART', lookup('DRAWPOKER_ART') or 'false'),
        full_house_rule=rule,
        log_level=log_level,
    )
