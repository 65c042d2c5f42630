"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from hirepath.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path, source: str = "text") -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this intake session
        source: Input source for provenance ("text" or "pdf")

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Source": source},
    )


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_profile_extracted(profile, line_count: int) -> None:
    """Log a one-line overview of an extracted profile at debug level."""
    found = [
        name
        for name in ("name", "email", "phone", "location", "headline")
        if getattr(profile, name) is not None
    ]
    _log_debug(
        f"Extracted profile from {line_count} lines: fields={found}, "
        f"links={len(profile.links)}, skills={len(profile.skills)} ({profile.skills_source}), "
        f"sections={[s.name for s in profile.sections]}"
    )


def log_text_loaded(path: Path, char_count: int, method: str) -> None:
    """Log a successful text load."""
    _log_info(f"Loaded {char_count} characters from {path.name} via {method}")
