"""Replay layer: run recorded player actions through the engine."""

from .models import LogLevel, ReplayAction, ReplayActionError, ReplayConfig, ReplayResult, Undo
from .runner import load_config, run_replay

__all__ = [
    "LogLevel",
    "ReplayAction",
    "ReplayActionError",
    "ReplayConfig",
    "ReplayResult",
    "Undo",
    "load_config",
    "run_replay",
]
