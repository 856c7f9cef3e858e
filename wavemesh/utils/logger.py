# wavemesh/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер + накопитель диагностики для загрузчиков.
# ---------------------------------------------------------------

import logging

INFO = "info"
WARNING = "warning"
ERROR = "error"

_LEVELS = {
    INFO: logging.INFO,
    WARNING: logging.WARNING,
    ERROR: logging.ERROR,
}


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("wavemesh")

logger = init_logger()


class DiagnosticLog:
    """
    Журнал одного сеанса разбора.

    Всё, что пришло через `emit`, уходит в `logger` и одновременно
    складывается в упорядоченные списки `errors` / `warnings` / `infos`,
    чтобы вызывающий код мог получить полный список, а не только
    последнее сообщение.
    """

    def __init__(self, component: str = "wavemesh"):
        self.component = component
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.infos: list[str] = []

    def emit(self, level: str, message: str) -> None:
        if level not in _LEVELS:
            raise ValueError(f"Unknown diagnostic level: {level}")
        logger.log(_LEVELS[level], f"[{self.component}] {message}")
        if level == ERROR:
            self.errors.append(message)
        elif level == WARNING:
            self.warnings.append(message)
        else:
            self.infos.append(message)

    def error(self, message: str) -> None:
        self.emit(ERROR, message)

    def warn(self, message: str) -> None:
        self.emit(WARNING, message)

    def info(self, message: str) -> None:
        self.emit(INFO, message)

    def exists_error(self) -> bool:
        return bool(self.errors)

    def exists_warning(self) -> bool:
        return bool(self.warnings)

    def child(self, component: str) -> "DiagnosticLog":
        """Журнал с другим префиксом, пишущий в те же списки."""
        log = DiagnosticLog(component)
        log.errors = self.errors
        log.warnings = self.warnings
        log.infos = self.infos
        return log

    def clear(self) -> None:
        self.errors.clear()
        self.warnings.clear()
        self.infos.clear()


def located(file_name: str, line: int, message: str) -> str:
    """Привязать сообщение к файлу и строке (строки нумеруются с 1)."""
    return f"{file_name} line {line}: {message}"
