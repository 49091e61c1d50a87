"""
Logger setup shared by every vitae context.

The package logger is disabled on import (see vitae/__init__.py). A script
opts in by calling setup_logger once, which writes a full DEBUG log for the
session to disk and mirrors INFO and above to the console. Context modules
wrap it in contexts/{context}/logger.py.
"""

import platform
import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

import vitae

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

# Console colors that differ from loguru's defaults
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Route vitae's log messages to a session log file and the console.

    Replaces any previously installed handlers, so calling it again starts
    a new session.

    Args:
        context_name: Context identifier, also the log file's stem (e.g., "render")
        log_dir: Directory for this session, created if missing
        extra_provenance: Run details to record in the header (e.g., {"Engine": "latex"})
        console_level: Lowest level echoed to stdout

    Returns:
        Path to the session log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.enable("vitae")

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance({**collect_provenance(), **(extra_provenance or {})})

    return log_file


def collect_provenance() -> Dict[str, str]:
    """Details of the current process worth keeping with a rendered document."""
    return {
        "vitae": vitae.__version__,
        "Command": " ".join(sys.argv),
        "Working directory": str(Path.cwd()),
        "Python": platform.python_version(),
    }


def log_provenance(fields: Dict[str, str]) -> None:
    """Write a framed "key: value" header block at INFO level."""
    rule = "=" * 80
    logger.info(rule)
    for key, value in fields.items():
        logger.info(f"{key}: {value}")
    logger.info(rule)
