"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS = ("terminal", "json")


@dataclass
class RulesConfig:
    include: List[str] = field(default_factory=list)  # empty = all rules
    exclude: List[str] = field(default_factory=list)
    track_suppressions: bool = False  # keep suppressed rules, flagged


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True


@dataclass
class GosecRulesConfig:
    version: str = "1.0"
    rules: RulesConfig = field(default_factory=RulesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
