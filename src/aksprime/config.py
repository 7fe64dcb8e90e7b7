"""Runtime configuration and validation for aksprime."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class AKSConfig:
    workers: int = 1
    cancel_check_every: int = 1
    deadline_s: Optional[float] = None
    time_job: bool = False
    progress_to_terminal: bool = False

_CONFIG: Optional[AKSConfig] = None

class ConfigError(ValueError):
    pass

#user-supplied settings are validated here and put in an instance of AKSConfig
def configure(
    *,
    workers: Optional[int] = 1, #None means one per cpu
    cancel_check_every: int = 1,
    deadline_s: Optional[float] = None,
    time_job: bool = False,
    progress_to_terminal: bool = False,
) -> AKSConfig:
    """Configure how witness verification is run.

    Settings apply to every subsequent call until clear_config().
    """
    if workers is None:
        workers = os.cpu_count() or 1
    if workers <= 0:
        raise ConfigError("workers must be positive")
    if cancel_check_every is None or cancel_check_every <= 0:
        raise ConfigError("cancel_check_every must be positive")
    if deadline_s is not None and deadline_s <= 0:
        raise ConfigError("deadline_s must be positive if set")

    cfg = AKSConfig(
        workers=workers,
        cancel_check_every=cancel_check_every,
        deadline_s=deadline_s,
        time_job=time_job,
        progress_to_terminal=progress_to_terminal,
    )

    global _CONFIG
    _CONFIG = cfg
    return cfg

def get_config() -> Optional[AKSConfig]:
    return _CONFIG

def effective_config() -> AKSConfig:
    return _CONFIG if _CONFIG is not None else AKSConfig()

def clear_config() -> None:
    global _CONFIG
    _CONFIG = None
