# wavemesh/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger        – готовый объект logging.Logger (с level INFO)
    * DiagnosticLog – накопитель ошибок/предупреждений одного разбора
    * Config        – настройки загрузчика
"""

from .logger import logger, DiagnosticLog
from .config import Config, DEFAULT_CONFIG

__all__ = ["logger", "DiagnosticLog", "Config", "DEFAULT_CONFIG"]
