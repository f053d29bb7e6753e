"""JSON reporter for a generated rule list."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from gosecrules.rules.builtin import ALL_BUILTIN_RULES
from gosecrules.rules.models import RuleDefinition, RuleList


def to_dict(
    rule_list: RuleList,
    *,
    catalog: Sequence[RuleDefinition] = ALL_BUILTIN_RULES,
) -> Dict[str, Any]:
    """Convert a RuleList to a JSON-serialisable dict, in catalog order."""
    entries: List[Dict[str, Any]] = []
    for rule in catalog:
        if rule.id not in rule_list.rule_suppressed:
            continue
        suppressed = rule_list.is_suppressed(rule.id)
        entries.append({
            "id": rule.id,
            "description": rule.description,
            "category": rule.category,
            "active": rule.id in rule_list.rules and not suppressed,
            "suppressed": suppressed,
        })

    return {
        "version": "1.0",
        "track_suppressions": rule_list.track_suppressions,
        "total_rules": len(entries),
        "active_rules": len(rule_list.active_ids),
        "suppressed_rules": len(rule_list.suppressed_ids),
        "rules": entries,
    }


def render(rule_list: RuleList) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(rule_list), indent=2)
