"""Rule data model: definitions, builder references, generated rule lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Protocol, Tuple

CATEGORIES: Dict[str, str] = {
    "1": "misc",
    "2": "injection",
    "3": "filesystem",
    "4": "crypto",
    "5": "blocklist",
    "6": "memory",
}


def category_of(rule_id: str) -> str:
    """Return the category name encoded by the hundreds digit of *rule_id*."""
    if len(rule_id) != 4 or not rule_id[1:].isdigit():
        return "unknown"
    return CATEGORIES.get(rule_id[1], "unknown")


class RuleBuilder(Protocol):
    """Call shape the analysis driver uses to instantiate a check."""

    def __call__(self, rule_id: str, config: Mapping[str, Any]) -> Any: ...


@dataclass(frozen=True)
class BuilderRef:
    """Opaque reference to a check constructor.

    The catalog never builds checks itself; ``name`` is resolved by the
    driver that walks source files.
    """

    name: str


@dataclass(frozen=True)
class RuleDefinition:
    """A catalog entry: stable ID, description and constructor capability."""

    id: str
    description: str
    create: RuleBuilder | BuilderRef

    @property
    def category(self) -> str:
        return category_of(self.id)


@dataclass
class RuleList:
    """Active rules plus the per-ID suppression ledger for one generate() call."""

    rules: Dict[str, RuleDefinition] = field(default_factory=dict)
    rule_suppressed: Dict[str, bool] = field(default_factory=dict)
    track_suppressions: bool = False

    def rules_info(self) -> Tuple[Dict[str, RuleBuilder | BuilderRef], Dict[str, bool]]:
        """Return ``({id: builder}, {id: suppressed})`` for the scanning driver."""
        builders = {rule_id: rule.create for rule_id, rule in self.rules.items()}
        return builders, self.rule_suppressed

    def is_suppressed(self, rule_id: str) -> bool:
        return self.rule_suppressed.get(rule_id, False)

    @property
    def active_ids(self) -> list[str]:
        """IDs that are present and not flagged suppressed."""
        return [r for r in self.rules if not self.rule_suppressed.get(r, False)]

    @property
    def suppressed_ids(self) -> list[str]:
        return [r for r, flag in self.rule_suppressed.items() if flag]
