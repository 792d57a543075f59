# movingblocks/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger      – готовый объект logging.Logger (с level INFO)
    * Config      – JSON‑конфигурация
    * FPSCounter  – скользящее среднее FPS
    * Profiler    – контекст‑менеджер замера времени
"""

from .logger import logger
from .config import Config
from .fps_counter import FPSCounter
from .profiler import Profiler

__all__ = ["logger", "Config", "FPSCounter", "Profiler"]
