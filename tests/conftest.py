"""Shared test fixtures: small catalogs, filters, configs."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from gosecrules.rules.models import BuilderRef, RuleDefinition


@pytest.fixture
def small_catalog() -> tuple:
    """Three-rule catalog spanning two categories."""
    return (
        RuleDefinition("G101", "Hardcoded credentials", BuilderRef("creds")),
        RuleDefinition("G201", "SQL format string", BuilderRef("sql_format")),
        RuleDefinition("G401", "Weak hash", BuilderRef("weak_hash")),
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A .gosecrules.toml excluding G104 with tracking on."""
    path = tmp_path / ".gosecrules.toml"
    path.write_text(textwrap.dedent("""\
        version = "1.0"

        [rules]
        exclude = ["G104"]
        track_suppressions = true

        [output]
        format = "json"
    """))
    return path
