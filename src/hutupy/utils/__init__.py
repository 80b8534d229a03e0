"""Utility functions and helpers."""

from .logging import get_logger
from .io import load_config, save_results, Settings
from .timers import Stopwatch, Timer, time_function

__all__ = ["get_logger", "load_config", "save_results", "Settings",
           "Stopwatch", "Timer", "time_function"]
