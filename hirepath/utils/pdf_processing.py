"""
PDF processing utilities for text extraction and verification.

Main class:
    PDFDocument: Parsed PDF with line-based text extraction and search.

Helper functions:
    page_count: Quick page count without full extraction.
    normalize_for_matching: Text normalization for fuzzy matching.
    cluster_by_y_tolerance: Y-coordinate clustering for line detection.
"""

from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

import pdfplumber
from PyPDF2 import PdfReader


def page_count(pdf_path: Path) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        reader = PdfReader(str(pdf_path))
        return len(reader.pages)
    except Exception:
        return None


def normalize_for_matching(text: str) -> str:
    """Keep only lowercase alphanumeric characters for fuzzy text matching."""
    return "".join(c for c in text.lower() if c.isalnum())


def cluster_by_y_tolerance(chars: List, tolerance: float = 3.0) -> List[List]:
    """
    Group characters into lines by Y-coordinate proximity.

    Handles baseline shifts between bold/italic/regular runs drawn on the
    same line (e.g., a bold job title with italic dates) that would otherwise
    split one visual line in two.
    """
    if not chars:
        return []

    sorted_chars = sorted(chars, key=lambda c: c["top"])

    lines = []
    current_line = [sorted_chars[0]]
    current_y = sorted_chars[0]["top"]

    for char in sorted_chars[1:]:
        if abs(char["top"] - current_y) <= tolerance:
            current_line.append(char)
        else:
            lines.append(current_line)
            current_line = [char]
            current_y = char["top"]

    if current_line:
        lines.append(current_line)

    return lines


def read_pdf_pages_text(pdf_path: Union[str, Path]) -> List[str]:
    """Extract plain text per page with pdfplumber (empty string for image-only pages)."""
    with pdfplumber.open(str(pdf_path)) as pdf:
        return [page.extract_text() or "" for page in pdf.pages]


class PDFDocument:
    """
    Parsed PDF with line-based text extraction.

    Characters are clustered into lines by y-coordinate, then rebuilt
    left-to-right. Word gaps are restored from horizontal spacing so that
    lines read the way they were drawn.

    Page data is lazily loaded and cached on first access.

    Args:
        pdf_path: Path to PDF file
        y_tolerance: Max Y-distance (points) to group characters as same line.
        space_threshold: Horizontal gap (in points) treated as a word break.

    Example:
        >>> pdf = PDFDocument(Path("resume.pdf"))
        >>> for line in pdf.get_lines(page=1):
        ...     print(line)
    """

    def __init__(
        self,
        pdf_path: Union[str, Path],
        y_tolerance: float = 3.0,
        space_threshold: float = 1.5,
    ):
        pdf_path = Path(pdf_path) if isinstance(pdf_path, str) else pdf_path
        if not pdf_path.exists():
            raise FileNotFoundError(f"PDF not found: {pdf_path}")

        self.pdf_path = pdf_path
        self.y_tolerance = y_tolerance
        self.space_threshold = space_threshold
        self._pages_cache: Optional[Dict[int, List[str]]] = None
        self._page_count: Optional[int] = None

    @property
    def page_count(self) -> int:
        if self._page_count is None:
            self._page_count = page_count(self.pdf_path) or 0
        return self._page_count

    def _extract_pages(self, max_pages: int = 100) -> Dict[int, List[str]]:
        """
        Extract text lines from all pages.

        Returns:
            Dict mapping page_num (1-indexed) to its text lines, top-to-bottom.
        """
        pages_data: Dict[int, List[str]] = {}

        with pdfplumber.open(self.pdf_path) as pdf:
            for page_num, page in enumerate(pdf.pages[:max_pages], start=1):
                pages_data[page_num] = self._chars_to_lines(page.chars)

        return pages_data

    def _chars_to_lines(self, chars: List) -> List[str]:
        """Convert character list to text lines with Y-clustering."""
        line_clusters = cluster_by_y_tolerance(chars, tolerance=self.y_tolerance)

        text_lines = []
        for char_objs in line_clusters:
            char_objs.sort(key=lambda c: c["x0"])
            pieces = []
            previous = None
            for char in char_objs:
                if previous is not None and char["x0"] - previous["x1"] > self.space_threshold:
                    pieces.append(" ")
                pieces.append(char["text"])
                previous = char
            text_lines.append("".join(pieces))

        return text_lines

    def _ensure_loaded(self) -> None:
        """Lazily load page data if not already cached."""
        if self._pages_cache is None:
            self._pages_cache = self._extract_pages()

    def get_lines(self, page: int) -> List[str]:
        """
        Get text lines for a specific page.

        Args:
            page: Page number (1-indexed)

        Returns:
            List of text lines, top-to-bottom order.
            Empty list if page doesn't exist.
        """
        self._ensure_loaded()
        return list(self._pages_cache.get(page, []))

    def find(self, text: str, whole_line: bool = False) -> Optional[Tuple[int, int]]:
        """
        Find first occurrence of text in the document.

        Args:
            text: Text to search for (normalized: lowercase, alphanumeric only)
            whole_line: If True, text must match entire line. If False, substring match.

        Returns:
            Tuple of (page, line_index) for first match, or None.
        """
        result = self.find_all(text, whole_line=whole_line, limit=1)
        return result[0] if result else None

    def find_all(
        self,
        text: str,
        whole_line: bool = False,
        limit: Optional[int] = None,
    ) -> List[Tuple[int, int]]:
        """
        Find all occurrences of text in the document.

        Returns:
            List of (page, line_index) tuples for each match.
        """
        self._ensure_loaded()

        results: List[Tuple[int, int]] = []
        text_norm = normalize_for_matching(text)

        for page_num in sorted(self._pages_cache.keys()):
            for line_idx, line in enumerate(self._pages_cache[page_num]):
                line_norm = normalize_for_matching(line)
                match = (text_norm == line_norm) if whole_line else (text_norm in line_norm)
                if match:
                    results.append((page_num, line_idx))
                    if limit and len(results) >= limit:
                        return results

        return results

    def iter_pages(self) -> Iterator[int]:
        """Iterate over page numbers (1-indexed)."""
        self._ensure_loaded()
        return iter(sorted(self._pages_cache.keys()))
