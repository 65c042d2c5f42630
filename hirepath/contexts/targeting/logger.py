"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from hirepath.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(log_dir: Path, job_source: str = "") -> Path:
    """
    Setup logger for targeting context.

    Args:
        log_dir: Directory for this targeting session
        job_source: Job description file name recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="target",
        log_dir=log_dir,
        extra_provenance={"Job description": job_source or None},
    )


# Wrapper functions with automatic [target] prefix


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level targeting-specific logging helpers


def log_coverage(coverage) -> None:
    """Log keyword coverage summary, with the missing keywords at debug level."""
    _log_info(
        f"Keyword coverage {len(coverage.matched)}/{coverage.total} ({coverage.ratio:.0%})"
    )
    if coverage.missing:
        _log_debug(f"  Missing: {', '.join(coverage.missing)}")


def log_draft_built(header_name: str, line_count: int, section_count: int) -> None:
    """Log a finished draft resume."""
    _log_debug(f"Built draft for '{header_name}': {line_count} lines, {section_count} sections")
