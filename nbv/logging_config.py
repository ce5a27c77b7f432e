import logging
import logging.config
from pathlib import Path
from typing import Optional, Dict
from datetime import datetime

MODULE_LOG_PREFIXES = {
    "nbv.frontier": "frontier",
    "nbv.camera_model": "camera_model",
}


def default_module_logs(timestamp: str) -> Dict[str, str]:
    """Per-module log files for the clustering and frustum code.

    Example: ``{"nbv.frontier": "frontier_<timestamp>.log", ...}``
    """
    return {
        mod: f"{prefix}_{timestamp}.log"
        for mod, prefix in MODULE_LOG_PREFIXES.items()
    }


def setup_logging(
    log_file: Optional[str] = None,
    level: int = logging.INFO,
    module_logs: Optional[Dict[str, str]] = None,
    log_dir: str = "logs",
    timestamp: Optional[str] = None,
) -> None:
    """Configure logging with a global log file and per-module logs.

    module_logs: dict like {"nbv.camera_model": "camera_model.log"}.
    ``None`` uses :func:`default_module_logs`, splitting frontier and
    camera output into their own files; pass ``{}`` to log everything to
    the global file.

    Modules log through ``logging.getLogger(__name__)``, so a per-module
    entry keyed by ``"nbv.frontier"`` captures everything the frontier
    clustering code emits. Entries keyed by a parent package
    (``"nbv"``) capture all of its modules.

    Example:
        setup_logging(
            log_file="nbv.log",
            module_logs={"nbv.camera_model": "frustum.log"},
            level=logging.DEBUG,
        )
    """

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    timestamp = timestamp or datetime.now().strftime("%Y%m%d_%H%M%S")
    if module_logs is None:
        module_logs = default_module_logs(timestamp)

    # Fallback global log
    if not log_file:
        log_file = f"default_log_{timestamp}.log"

    handlers = {}

    # Root/global file handler
    handlers["file"] = {
        "class": "logging.FileHandler",
        "formatter": "default",
        "level": level,
        "filename": str(log_path / log_file),
        "encoding": "utf-8",
        "mode": "w",
    }

    root_handlers = ["file"]
    loggers = {}

    # Add custom per-module file handlers
    if module_logs:
        for mod, fname in module_logs.items():
            handler_name = f"{mod.replace('.', '_')}_file"
            handlers[handler_name] = {
                "class": "logging.FileHandler",
                "formatter": "default",
                "level": level,
                "filename": str(log_path / fname),
                "encoding": "utf-8",
                "mode": "w"
            }
            loggers[mod] = {
                "level": level,
                "handlers": [handler_name],
                "propagate": False
            }

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s [%(name)s]: %(message)s"
            }
        },
        "handlers": handlers,
        "root": {"level": level, "handlers": root_handlers},
        "loggers": loggers,
    }

    logging.config.dictConfig(logging_config)
