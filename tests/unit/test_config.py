"""Unit tests for settings loading with OmegaConf structured defaults."""

import pytest
from omegaconf.errors import OmegaConfBaseException

from hirepath.utils.config import FontFamily, PageGeometry, Settings, Typography, load_settings


@pytest.fixture
def no_env_config(monkeypatch):
    monkeypatch.delenv("HIREPATH_CONFIG", raising=False)


@pytest.mark.unit
def test_defaults(no_env_config):
    settings = load_settings()

    assert isinstance(settings, Settings)
    assert settings.geometry == PageGeometry()
    assert settings.geometry.content_width == 512
    assert settings.geometry.bottom_limit == 80
    assert settings.typography.line_height == 14.5
    assert settings.typography.footer_size == 9
    assert settings.extractor.max_skills == 24
    assert settings.extractor.skill_dictionary[0] == "python"


@pytest.mark.unit
def test_yaml_override(no_env_config, tmp_path):
    config = tmp_path / "hirepath.yaml"
    config.write_text("geometry:\n  margin: 54\ntypography:\n  brand: Acme Careers\n")

    settings = load_settings(config)

    assert settings.geometry.margin == 54
    assert settings.geometry.width == 612
    assert settings.typography.brand == "Acme Careers"
    assert settings.typography == Typography(brand="Acme Careers")


@pytest.mark.unit
def test_env_variable_path(monkeypatch, tmp_path):
    config = tmp_path / "env.yaml"
    config.write_text("fonts:\n  regular: Times-Roman\n")
    monkeypatch.setenv("HIREPATH_CONFIG", str(config))

    settings = load_settings()

    assert settings.fonts.regular == "Times-Roman"
    assert settings.fonts.bold == FontFamily().bold


@pytest.mark.unit
def test_missing_file(no_env_config, tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.yaml")


@pytest.mark.unit
def test_unknown_key_rejected(no_env_config, tmp_path):
    config = tmp_path / "bad.yaml"
    config.write_text("geometry:\n  gutter: 3\n")

    with pytest.raises(OmegaConfBaseException):
        load_settings(config)


@pytest.mark.unit
def test_font_family_name_for():
    fonts = FontFamily()

    assert fonts.name_for("regular") == "Helvetica"
    assert fonts.name_for("bold") == "Helvetica-Bold"
    assert fonts.name_for("italic") == "Helvetica-Oblique"
