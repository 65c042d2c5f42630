#!/usr/bin/env python3
"""
Resume / Job Description Matching CLI

Extracts the top keywords from a job description, reports which of them the
resume already covers, and optionally writes an offline draft resume aimed at
those keywords (flat text ready for render_resume.py).

Examples:\n

    match_job.py resume.pdf data/jobs/MLEng_Acme.md                      # Coverage report

    match_job.py resume.pdf data/jobs/MLEng_Acme.md --limit 20           # Top 20 keywords

    match_job.py resume.txt job.md --draft outs/tailored/draft.txt       # Also write a draft
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf.errors import OmegaConfBaseException
from typing_extensions import Annotated

from hirepath.contexts.intake import extract_keywords, extract_profile
from hirepath.contexts.intake.exceptions import HirePathError
from hirepath.contexts.intake.resume_loader import load_resume_text
from hirepath.contexts.targeting import build_draft_resume, score_keyword_coverage
from hirepath.contexts.targeting.logger import setup_targeting_logger
from hirepath.utils.config import load_settings

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Score a resume against a job description's keywords",
    add_completion=False,
)


@app.command()
def main(
    resume_path: Annotated[
        Path,
        typer.Argument(help="Resume file (.pdf, .txt or .md)"),
    ],
    job_path: Annotated[
        Path,
        typer.Argument(help="Job description text file"),
    ],
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", help="Number of job keywords (default: extractor.keyword_limit)", min=1),
    ] = None,
    draft: Annotated[
        Optional[Path],
        typer.Option("--draft", "-d", help="Write an offline draft resume (flat text) to this path"),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="YAML settings override (default: $HIREPATH_CONFIG)"),
    ] = None,
):
    """
    Report keyword coverage of a resume against a job description.

    Examples:\n

        $ match_job.py resume.pdf job.md                     # Coverage only

        $ match_job.py resume.pdf job.md -d draft.txt        # Coverage plus draft
    """
    setup_targeting_logger(
        LOGS_PATH / f"target_{datetime.now():%Y%m%d_%H%M%S}", job_source=job_path.name
    )

    try:
        settings = load_settings(config_path)
        resume_text = load_resume_text(resume_path)
        job_text = job_path.read_text(encoding="utf-8")
    except (HirePathError, OSError, UnicodeDecodeError, OmegaConfBaseException) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    keywords = extract_keywords(job_text, limit=limit or settings.extractor.keyword_limit)
    coverage = score_keyword_coverage(resume_text, keywords)

    typer.secho(f"\nMatching: {resume_path.name} → {job_path.name}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Coverage: {len(coverage.matched)}/{coverage.total} ({coverage.ratio:.0%})")
    typer.echo("")
    for keyword in coverage.matched:
        typer.secho(f"  ✓ {keyword}", fg=typer.colors.GREEN)
    for keyword in coverage.missing:
        typer.secho(f"  ✗ {keyword}", fg=typer.colors.YELLOW)

    if draft:
        profile = extract_profile(
            resume_text,
            skill_dictionary=settings.extractor.skill_dictionary,
            max_skills=settings.extractor.max_skills,
        )
        draft.parent.mkdir(parents=True, exist_ok=True)
        draft.write_text(build_draft_resume(profile, keywords), encoding="utf-8")
        typer.echo(f"\n  Draft: {draft}")
    typer.echo("")


if __name__ == "__main__":
    app()
