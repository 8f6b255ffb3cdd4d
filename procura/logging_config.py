import logging
import os
from logging.handlers import RotatingFileHandler

from procura.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# Bu modulun ekledigi handler'larin isim oneki
HANDLER_PREFIX = "procura."


def _level(name: str, default: int) -> int:
    return getattr(logging, name.upper(), default)


def _build_handlers(level: int, log_file: str) -> list[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(HANDLER_PREFIX + "console")
    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.set_name(HANDLER_PREFIX + "file")
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(log_level: str | None = None, log_file: str | None = None) -> None:
    """
    Loglama yapilandirmasi.

    - Konsol her zaman, log dosyasi LOG_FILE doluysa (rotating, 5MB x 3)
    - SQLAlchemy engine loglari SQL_LOG_LEVEL seviyesinde tutulur
    - Tekrar cagrilirsa (reload, testler) onceki handler'lar degistirilir,
      ayni mesaj iki kez yazilmaz

    Parametre verilmezse degerler settings'ten okunur.
    """
    level_name = (log_level or settings.LOG_LEVEL).upper()
    level = _level(level_name, logging.INFO)
    if log_file is None:
        log_file = settings.LOG_FILE

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root_logger.removeHandler(handler)
            handler.close()

    for handler in _build_handlers(level, log_file):
        root_logger.addHandler(handler)

    logging.getLogger("sqlalchemy.engine").setLevel(
        _level(settings.SQL_LOG_LEVEL, logging.WARNING)
    )

    logging.getLogger(__name__).info(
        "Logging yapilandirmasi tamamlandi (seviye: %s, dosya: %s)",
        level_name, log_file or "-",
    )
