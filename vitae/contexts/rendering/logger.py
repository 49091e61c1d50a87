"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, engine: str = "", template_id: str = "") -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        engine: Output engine for provenance
        template_id: Template id for provenance

    Returns:
        Path to log file

    Example:
        from vitae.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir, engine="latex")
        _log_info("Rendering resume...")
    """
    provenance = {}
    if engine:
        provenance["Engine"] = engine
    if template_id:
        provenance["Template"] = template_id

    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance=provenance,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_template_fallback(engine: str, requested: str, resolved: str) -> None:
    """Log that a layout's template id was replaced by the engine default."""
    if requested:
        _log_debug(f"Unknown {engine} template '{requested}', using '{resolved}'")
    else:
        _log_debug(f"No {engine} template requested, using '{resolved}'")


def log_render_result(engine: str, template_id: str, output: str) -> None:
    """Log the size of a rendered document."""
    _log_debug(f"Rendered {engine}/{template_id}: {len(output.splitlines())} lines, {len(output)} chars")
