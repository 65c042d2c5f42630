"""
Integration tests for resume file loading - text and PDF intake.
"""

import pytest
from reportlab.pdfgen import canvas

from hirepath.contexts.intake import extract_profile
from hirepath.contexts.intake.exceptions import HirePathError, InsufficientTextError, ResumeFileError
from hirepath.contexts.intake.resume_loader import extract_pdf_text, load_resume_text

RESUME_LINES = [
    "Jane Doe",
    "Senior Data Scientist",
    "jane.doe@example.com | (415) 555-0134",
    "Austin, TX",
    "Skills",
    "Python, SQL, PyTorch",
]


def write_text_pdf(path, lines):
    pdf = canvas.Canvas(str(path), pagesize=(612, 792))
    pdf.setFont("Helvetica", 11)
    y = 740
    for line in lines:
        pdf.drawString(50, y, line)
        y -= 16
    pdf.showPage()
    pdf.save()


def write_blank_pdf(path):
    pdf = canvas.Canvas(str(path), pagesize=(612, 792))
    pdf.showPage()
    pdf.save()


@pytest.mark.integration
def test_extract_pdf_text(tmp_path):
    pdf_path = tmp_path / "resume.pdf"
    write_text_pdf(pdf_path, RESUME_LINES)

    text = extract_pdf_text(pdf_path)

    assert "Jane Doe" in text
    assert "jane.doe@example.com" in text


@pytest.mark.integration
def test_pdf_to_profile(tmp_path):
    pdf_path = tmp_path / "resume.pdf"
    write_text_pdf(pdf_path, RESUME_LINES)

    profile = extract_profile(load_resume_text(pdf_path))

    assert profile.name == "Jane Doe"
    assert profile.email == "jane.doe@example.com"
    assert profile.location == "Austin, TX"
    assert profile.skills == ("Python", "SQL", "PyTorch")


@pytest.mark.integration
def test_blank_pdf_raises_insufficient_text(tmp_path):
    pdf_path = tmp_path / "scan.pdf"
    write_blank_pdf(pdf_path)

    with pytest.raises(InsufficientTextError) as excinfo:
        extract_pdf_text(pdf_path)

    assert excinfo.value.char_count == 0
    assert excinfo.value.min_chars == 20
    assert "OCR" in str(excinfo.value)


@pytest.mark.integration
def test_missing_pdf(tmp_path):
    with pytest.raises(ResumeFileError):
        extract_pdf_text(tmp_path / "missing.pdf")


@pytest.mark.integration
def test_corrupt_pdf(tmp_path):
    pdf_path = tmp_path / "corrupt.pdf"
    pdf_path.write_bytes(b"this is not a pdf")

    with pytest.raises(ResumeFileError) as excinfo:
        extract_pdf_text(pdf_path)

    assert excinfo.value.path == pdf_path


@pytest.mark.integration
def test_load_plain_text(tmp_path):
    path = tmp_path / "resume.txt"
    path.write_text("Jane Doe\nData Scientist\n", encoding="utf-8")

    assert load_resume_text(path) == "Jane Doe\nData Scientist\n"


@pytest.mark.integration
def test_unsupported_extension(tmp_path):
    path = tmp_path / "resume.docx"
    path.write_bytes(b"PK")

    with pytest.raises(ResumeFileError) as excinfo:
        load_resume_text(path)

    assert isinstance(excinfo.value, HirePathError)
    assert ".docx" in str(excinfo.value)
