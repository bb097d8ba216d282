from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_log_dir(settings: object) -> Path:
    """Resolve the log directory.

    - If TABNAV_LOG_DIR is absolute, use it directly.
    - Otherwise, treat it as relative to the project root.
    """

    raw = getattr(settings, "TABNAV_LOG_DIR", Path("_logs"))
    p = raw if isinstance(raw, Path) else Path(str(raw))
    if p.is_absolute():
        return p

    project_root = Path(__file__).resolve().parents[1]
    return project_root / p


def setup_logging(settings: object) -> Path | None:
    """Configure console (and optionally rotating file) logging.

    Returns the log file path, or None when file logging is disabled.

    Rotation:
      - Daily rotation at midnight.
      - Keep the last `TABNAV_LOG_BACKUP_COUNT` rotated files.

    Safe to call multiple times (it resets handlers).
    """

    level_name = str(getattr(settings, "TABNAV_LOG_LEVEL", "INFO") or "INFO").upper().strip()
    level = getattr(logging, level_name, logging.INFO)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers = []
    root.setLevel(level)
    root.addHandler(console_handler)

    log_file: Path | None = None
    if bool(getattr(settings, "TABNAV_LOG_TO_FILE", False)):
        log_dir = _resolve_log_dir(settings)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "tabnav.log"

        file_handler = TimedRotatingFileHandler(
            filename=str(log_file),
            when="midnight",
            interval=1,
            backupCount=max(0, int(getattr(settings, "TABNAV_LOG_BACKUP_COUNT", 14) or 0)),
            encoding="utf-8",
            utc=False,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    logging.getLogger("tabnav").debug(
        "tabnav logging enabled (file=%s, level=%s)",
        os.fspath(log_file) if log_file else None,
        level_name,
    )

    return log_file
