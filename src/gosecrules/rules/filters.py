"""Rule filters: a single predicate type for both exclude and include-only.

A filter returns True when a rule ID should be flagged as suppressed:

  - ``new_rule_filter(True, "G101")`` suppresses G101 only (exclude).
  - ``new_rule_filter(False, "G101")`` suppresses everything except G101
    (include-only).

IDs are not checked against the catalog; unknown IDs simply never match.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class RuleFilter:
    action: bool
    rule_ids: FrozenSet[str]

    def __call__(self, rule_id: str) -> bool:
        if rule_id in self.rule_ids:
            return self.action
        return not self.action


def new_rule_filter(action: bool, *rule_ids: str) -> RuleFilter:
    """Build a filter that excludes (*action* True) or keeps only (*action* False) *rule_ids*."""
    return RuleFilter(action=action, rule_ids=frozenset(rule_ids))
