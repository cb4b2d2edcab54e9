import logging
import logging.handlers
from pathlib import Path
from healthcare_records.core.config import LOGS_DIR, LOG_LEVEL

DEFAULT_FMT = "%(asctime)s - %(levelname)-5s - %(name)s - %(message)s"
DATE_FMT = "%Y-%m-%d %H:%M:%S"

# statement text is logged by the row source at DEBUG; the engine's own echo is noise
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")

def setup_logging(level: str = LOG_LEVEL, file_name: str | None = "records.log") -> None:
    """Console logging, plus a rotating file under LOGS_DIR unless file_name is None."""
    if getattr(setup_logging, "_configured", False):
        return  # prevent double-config

    root = logging.getLogger()
    root.setLevel(level.upper())
    formatter = logging.Formatter(DEFAULT_FMT, datefmt=DATE_FMT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if file_name is not None:
        Path(LOGS_DIR).mkdir(parents=True, exist_ok=True)
        rotating = logging.handlers.RotatingFileHandler(
            Path(LOGS_DIR) / file_name, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
        rotating.setFormatter(formatter)
        root.addHandler(rotating)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    setup_logging._configured = True
