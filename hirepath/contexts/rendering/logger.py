"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from collections import Counter
from pathlib import Path

import reportlab
from loguru import logger

from hirepath.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, console_level: str = "INFO") -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        console_level: Minimum level echoed to the console

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"reportlab": reportlab.Version},
        console_level=console_level,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_layout_result(model, pages) -> None:
    """
    Log page count and line-kind breakdown for a finished layout.

    Args:
        model: ResumeDocumentModel that was laid out
        pages: List of Page produced by layout()
    """
    kinds = Counter(line.kind.value for line in model.body_lines)
    run_count = sum(len(page.instructions) for page in pages)
    _log_debug(
        f"Laid out '{model.header_name}' on {len(pages)} page(s), "
        f"{run_count} draw instructions, line kinds={dict(kinds)}"
    )


def log_pdf_written(output_path: Path, page_count: int, byte_count: int) -> None:
    """Log a written PDF file."""
    _log_success(f"Wrote {output_path.name}: {page_count} page(s), {byte_count} bytes")
    _log_debug(f"  PDF: {output_path}")
