# ============================================================================
# src/health_insights/utils/logging.py
# ============================================================================
"""
Logging configuration and utilities for the health insights engine.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime, timezone
import json

from ..core.config import get_config


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    format_json: Optional[bool] = None
) -> None:
    """
    Setup logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            None reads LOG_LEVEL from the config
        log_file: Optional file path for logging
        format_json: Whether to use JSON format; None reads LOG_JSON
    """
    config = get_config()
    if level is None:
        level = config.get('log_level', 'INFO')
    if format_json is None:
        format_json = config.get('log_json', False)

    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_json:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True
    )


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def mask_secret(value: Optional[str], visible: int = 6) -> str:
    """
    Render a credential for log output.

    Only the first few characters survive; the rest is replaced so keys
    never land in log files.
    """
    if not value:
        return "None"
    if len(value) <= visible:
        return "*" * len(value)
    return value[:visible] + "..."
