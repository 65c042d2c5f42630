"""
Configuration for the extractor and layout engine.

Defaults live in the dataclasses below. A YAML file can override any subset
of them; it is merged over the structured defaults with OmegaConf, so unknown
keys and wrongly-typed values are rejected at load time.

Example YAML:

    geometry:
      margin: 54
    typography:
      brand: "Acme Careers"
    extractor:
      max_skills: 12
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()

# Fixed dictionary used when a resume has no explicit Skills section.
# Matched by case-insensitive substring containment, in this order.
DEFAULT_SKILL_DICTIONARY = [
    "python",
    "sql",
    "pandas",
    "numpy",
    "pytorch",
    "tensorflow",
    "scikit-learn",
    "spark",
    "aws",
    "gcp",
    "azure",
    "docker",
    "kubernetes",
    "airflow",
    "mlflow",
    "terraform",
    "langchain",
    "rag",
    "faiss",
    "pinecone",
    "vertex",
    "sagemaker",
    "fastapi",
    "react",
    "postgres",
    "bigquery",
    "git",
    "bash",
    "linux",
]


@dataclass
class PageGeometry:
    """Fixed page geometry in PDF points (US Letter by default)."""

    width: float = 612.0
    height: float = 792.0
    margin: float = 50.0
    footer_reserve: float = 30.0
    footer_y: float = 30.0

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def top(self) -> float:
        return self.height - self.margin

    @property
    def bottom_limit(self) -> float:
        """Lowest cursor position allowed before a page break."""
        return self.margin + self.footer_reserve


@dataclass
class Typography:
    """Font sizes, indents and spacing factors for the layout engine."""

    body_size: float = 10.5
    line_gap: float = 4.0
    name_size: float = 20.0
    subtitle_size: float = 11.5
    contact_size: float = 9.5
    section_title_size: float = 11.5
    title_size: float = 11.0
    dates_size: float = 9.5
    bullet_indent: float = 12.0
    text_indent: float = 20.0
    bullet_glyph: str = "•"
    blank_line_factor: float = 0.6
    section_space_before: float = 0.4
    section_space_after: float = 0.3
    paragraph_gap: float = 2.0
    divider_thickness: float = 0.5
    brand: str = "HirePath.ai"

    @property
    def line_height(self) -> float:
        return self.body_size + self.line_gap

    @property
    def footer_size(self) -> float:
        return self.body_size - 1.5


@dataclass
class FontFamily:
    """PDF font names for the three weights the layout engine draws with."""

    regular: str = "Helvetica"
    bold: str = "Helvetica-Bold"
    italic: str = "Helvetica-Oblique"

    def name_for(self, weight: str) -> str:
        return getattr(self, weight)


@dataclass
class ExtractorSettings:
    """Tunables for the resume structure extractor."""

    max_skills: int = 24
    skill_dictionary: List[str] = field(default_factory=lambda: list(DEFAULT_SKILL_DICTIONARY))
    keyword_limit: int = 12


@dataclass
class Settings:
    """Top-level settings container."""

    geometry: PageGeometry = field(default_factory=PageGeometry)
    typography: Typography = field(default_factory=Typography)
    fonts: FontFamily = field(default_factory=FontFamily)
    extractor: ExtractorSettings = field(default_factory=ExtractorSettings)


def resolve_config_path(config_path: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """Return the explicit path, else HIREPATH_CONFIG from the environment, else None."""
    if config_path is not None:
        return Path(config_path)
    env_path = os.getenv("HIREPATH_CONFIG")
    return Path(env_path) if env_path else None


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings, merging an optional YAML override file over the defaults.

    Args:
        config_path: Optional path to a YAML file (defaults to HIREPATH_CONFIG env variable)

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If a config path is given but does not exist
    """
    base = OmegaConf.structured(Settings)

    path = resolve_config_path(config_path)
    if path is None:
        return OmegaConf.to_object(base)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    merged = OmegaConf.merge(base, OmegaConf.load(path))
    return OmegaConf.to_object(merged)
