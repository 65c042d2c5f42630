"""Custom exceptions for intake context file loading.

Text heuristics never raise; only the file-reading collaborators do.
"""

from pathlib import Path
from typing import Optional, Union


class HirePathError(Exception):
    """Base exception for HirePath errors."""

    pass


class ResumeFileError(HirePathError):
    """
    Exception raised when a resume file cannot be read.

    Attributes:
        path: Path of the file that failed to load
        reason: Underlying error description
    """

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None):
        self.path = Path(path)
        self.reason = reason

        parts = [f"Could not read resume file: {self.path}"]
        if reason:
            parts.append(f"Reason: {reason}")

        super().__init__("\n".join(parts))


class InsufficientTextError(HirePathError):
    """
    Exception raised when a file yields too little text to be a resume.

    Typically an image-only (scanned) PDF that needs OCR.

    Attributes:
        path: Path of the file
        char_count: Number of characters extracted
        min_chars: Minimum required
    """

    def __init__(self, path: Union[str, Path], char_count: int, min_chars: int):
        self.path = Path(path)
        self.char_count = char_count
        self.min_chars = min_chars
        super().__init__(
            f"Extracted only {char_count} characters from {self.path.name} "
            f"(minimum {min_chars}). The file may be a scanned image that needs OCR."
        )
