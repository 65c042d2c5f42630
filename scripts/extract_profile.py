#!/usr/bin/env python3
"""
Resume Profile Extraction CLI

Extracts a structured profile (name, contact fields, headline, skills,
sections) from a plain-text or PDF resume using the intake context.

Examples:\n

    extract_profile.py data/resumes/jane_doe.pdf                 # Human-readable profile

    extract_profile.py data/resumes/jane_doe.txt --json          # JSON to stdout

    extract_profile.py data/resumes/jane_doe.pdf --summary       # Add a quick summary

    extract_profile.py jane_doe.txt --config configs/hirepath.yaml
"""

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf.errors import OmegaConfBaseException
from typing_extensions import Annotated

from hirepath.contexts.intake import extract_profile, summarize_resume
from hirepath.contexts.intake.exceptions import HirePathError
from hirepath.contexts.intake.logger import setup_intake_logger
from hirepath.contexts.intake.resume_loader import load_resume_text
from hirepath.utils.config import load_settings

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Extract a structured profile from a resume (.txt or .pdf)",
    add_completion=False,
)


@app.command()
def main(
    resume_path: Annotated[
        Path,
        typer.Argument(help="Resume file (.pdf, .txt or .md)"),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the profile as JSON"),
    ] = False,
    summary: Annotated[
        bool,
        typer.Option("--summary", "-s", help="Also print a three-sentence quick summary"),
    ] = False,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="YAML settings override (default: $HIREPATH_CONFIG)"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for intake.log (default: $LOGS_PATH/intake_<timestamp>)"),
    ] = None,
):
    """
    Extract a profile from a resume file.

    Examples:\n

        $ extract_profile.py resume.pdf              # Pretty output

        $ extract_profile.py resume.txt --json       # Machine-readable output
    """
    log_dir = log_dir or LOGS_PATH / f"intake_{datetime.now():%Y%m%d_%H%M%S}"
    source = "pdf" if resume_path.suffix.lower() == ".pdf" else "text"
    setup_intake_logger(log_dir, source=source)

    try:
        settings = load_settings(config_path)
        text = load_resume_text(resume_path)
    except (HirePathError, FileNotFoundError, OmegaConfBaseException) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    profile = extract_profile(
        text,
        skill_dictionary=settings.extractor.skill_dictionary,
        max_skills=settings.extractor.max_skills,
    )
    quick = summarize_resume(text) if summary else None

    if as_json:
        data = profile.to_dict()
        if quick is not None:
            data["summary"] = {"sentences": quick.sentences, "bullets": quick.bullets}
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        raise typer.Exit(code=0)

    typer.secho(f"\nProfile: {resume_path.name}", fg=typer.colors.BLUE, bold=True)
    for field_name in ("name", "headline", "email", "phone", "location"):
        value = getattr(profile, field_name)
        if value:
            typer.echo(f"  ✓ {field_name}: {value}")
        else:
            typer.secho(f"  ✗ {field_name}: (not found)", fg=typer.colors.YELLOW)

    if profile.links:
        typer.echo(f"  Links: {', '.join(profile.links)}")
    if profile.skills:
        typer.echo(f"  Skills ({profile.skills_source}): {', '.join(profile.skills)}")
    for section in profile.sections:
        typer.echo(f"  {section.name}: {len(section.items)} items")

    if quick is not None:
        typer.secho("\nQuick summary", fg=typer.colors.BLUE, bold=True)
        typer.echo(f"  {quick.text}")
        for bullet in quick.bullets:
            typer.echo(f"  - {bullet}")
    typer.echo("")


if __name__ == "__main__":
    app()
