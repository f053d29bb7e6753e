"""Rule engine: models, filters, generator, built-in catalog."""

from gosecrules.rules.filters import RuleFilter, new_rule_filter
from gosecrules.rules.models import BuilderRef, RuleBuilder, RuleDefinition, RuleList
from gosecrules.rules.registry import build_rule_list, filters_from_config, generate

__all__ = [
    "BuilderRef",
    "RuleBuilder",
    "RuleDefinition",
    "RuleFilter",
    "RuleList",
    "build_rule_list",
    "filters_from_config",
    "generate",
    "new_rule_filter",
]
