"""
Logging setup for the SSO service.

local: human-readable lines at DEBUG
dev:   JSON lines at DEBUG
prod:  JSON lines at INFO
"""
from datetime import datetime, timezone
import json
import logging
import os
import sys
from typing import Any, MutableMapping, Optional

# Per-call context attached by the service through LoggerAdapter extras
CONTEXT_FIELDS = ("op", "email", "user_id", "app_id", "is_admin", "kind")

LOG_FILE_NAME = "sso.log"

_LEVELS = {
    "local": logging.DEBUG,
    "dev": logging.DEBUG,
    "prod": logging.INFO,
}


def _context(record: logging.LogRecord) -> dict:
    return {name: getattr(record, name) for name in CONTEXT_FIELDS if hasattr(record, name)}


class TextFormatter(logging.Formatter):
    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if context:
            line += " " + " ".join(f"{k}={v}" for k, v in context.items())
        return line


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        entry.update(_context(record))
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class OpLogger(logging.LoggerAdapter):
    """Logger bound to one operation's context (op, email, user_id, ...)."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]):
        extra = dict(self.extra)
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return msg, kwargs


def setup_logging(env: str, log_dir: Optional[str] = None) -> None:
    """
    Configure root logging for the given environment.

    Args:
        env: One of local, dev, prod
        log_dir: Optional directory for an additional file log

    Raises:
        ValueError: If env is not a known environment
    """
    if env not in _LEVELS:
        raise ValueError(f"Invalid env '{env}'. Must be one of: {', '.join(_LEVELS)}")

    formatter = TextFormatter() if env == "local" else JSONFormatter()

    handlers = [logging.StreamHandler(sys.stdout)]

    # Continue with stdout only if the file handler cannot be created
    if log_dir:
        try:
            os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(os.path.join(log_dir, LOG_FILE_NAME)))
        except OSError as e:
            print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=_LEVELS[env], handlers=handlers, force=True)
