#!/usr/bin/env python3
"""
Tailored Resume PDF Rendering CLI

Lays out flat tailored-resume text (name, subtitle, contact line, then body)
and writes a paginated PDF using the rendering context.

Examples:\n

    render_resume.py outs/tailored/jane_doe.txt                       # Writes Jane_Doe_Tailored_Resume.pdf

    render_resume.py tailored.txt --output outs/pdfs/jane.pdf         # Explicit output path

    render_resume.py tailored.txt --config configs/a4.yaml --verbose  # A4 geometry, debug console
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf.errors import OmegaConfBaseException
from typing_extensions import Annotated

from hirepath.contexts.rendering import parse_resume_document, tailored_resume_filename
from hirepath.contexts.rendering.logger import setup_rendering_logger
from hirepath.contexts.rendering.pdf_writer import write_resume_pdf
from hirepath.utils.config import load_settings
from hirepath.utils.pdf_processing import page_count

load_dotenv()
OUTPUT_PATH = Path(os.getenv("OUTPUT_PATH", "outs/pdfs"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Render flat tailored-resume text to a paginated PDF",
    add_completion=False,
)


@app.command()
def main(
    text_path: Annotated[
        Path,
        typer.Argument(help="Flat resume text file"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output PDF path (default: $OUTPUT_PATH/<Name>_Tailored_Resume.pdf)"),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="YAML settings override (default: $HIREPATH_CONFIG)"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for render.log (default: $LOGS_PATH/render_<timestamp>)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on the console"),
    ] = False,
):
    """
    Render a tailored resume text file to PDF.

    Examples:\n

        $ render_resume.py tailored.txt                  # Default output location

        $ render_resume.py tailored.txt -o resume.pdf    # Custom output
    """
    log_dir = log_dir or LOGS_PATH / f"render_{datetime.now():%Y%m%d_%H%M%S}"
    log_file = setup_rendering_logger(log_dir, console_level="DEBUG" if verbose else "INFO")

    try:
        settings = load_settings(config_path)
        flat_text = text_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError, OmegaConfBaseException) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if not flat_text.strip():
        typer.secho(f"Error: {text_path} is empty; nothing to render\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    model = parse_resume_document(flat_text)
    output = output or OUTPUT_PATH / tailored_resume_filename(model.header_name)

    typer.secho(f"\nRendering: {text_path.name}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Page size: {settings.geometry.width:g} x {settings.geometry.height:g} pt")
    typer.echo("")

    write_resume_pdf(flat_text, output, settings)

    typer.secho("✓ Rendered", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Pages: {page_count(output)}")
    typer.echo(f"  PDF: {output}")
    typer.echo(f"  Log: {log_file}")
    typer.echo("")


if __name__ == "__main__":
    app()
