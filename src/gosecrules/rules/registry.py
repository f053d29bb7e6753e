"""Rule set generator: reconciles filters against the catalog."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Sequence

from gosecrules.config.schema import GosecRulesConfig, RulesConfig
from gosecrules.rules.builtin import ALL_BUILTIN_RULES, BUILTIN_RULE_IDS
from gosecrules.rules.filters import RuleFilter, new_rule_filter
from gosecrules.rules.models import RuleDefinition, RuleList

logger = logging.getLogger(__name__)


def generate(
    track_suppressions: bool,
    *filters: Callable[[str], bool],
    catalog: Sequence[RuleDefinition] = ALL_BUILTIN_RULES,
) -> RuleList:
    """Generate the list of rules to use.

    Every catalog ID gets an entry in ``rule_suppressed``. A rule matched
    by any filter is flagged suppressed; it is left out of ``rules`` unless
    *track_suppressions* is set, in which case it is kept so reporters can
    show it as configured off.
    """
    result = RuleList(track_suppressions=track_suppressions)

    for rule in catalog:
        suppressed = False
        skip = False
        for rule_filter in filters:
            if rule_filter(rule.id):
                suppressed = True
                if not track_suppressions:
                    skip = True
                    break
        if not skip:
            result.rules[rule.id] = rule
        result.rule_suppressed[rule.id] = suppressed

    logger.debug(
        "Generated rule list: %d present, %d suppressed (tracking=%s)",
        len(result.rules),
        len(result.suppressed_ids),
        track_suppressions,
    )
    return result


def _clean_ids(ids: Iterable[str]) -> List[str]:
    return [i.strip() for i in ids if i and i.strip()]


def filters_from_config(rules_config: RulesConfig) -> List[RuleFilter]:
    """Turn include / exclude lists into the ordered filter sequence."""
    filters: List[RuleFilter] = []
    include = _clean_ids(rules_config.include)
    exclude = _clean_ids(rules_config.exclude)
    # Include-only first, then exclude
    if include:
        filters.append(new_rule_filter(False, *include))
    if exclude:
        filters.append(new_rule_filter(True, *exclude))
    return filters


def build_rule_list(config: GosecRulesConfig) -> RuleList:
    """Generate a rule list from a loaded config."""
    filters = filters_from_config(config.rules)
    return generate(config.rules.track_suppressions, *filters)


def unknown_rule_ids(ids: Iterable[str]) -> List[str]:
    """Return requested IDs that are not in the built-in catalog."""
    return sorted({i for i in _clean_ids(ids) if i not in BUILTIN_RULE_IDS})
