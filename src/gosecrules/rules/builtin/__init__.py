"""Built-in rules: aggregate all categories into the ordered catalog."""

from typing import Tuple

from gosecrules.rules.builtin.blocklist import ALL_BLOCKLIST_RULES
from gosecrules.rules.builtin.crypto import ALL_CRYPTO_RULES
from gosecrules.rules.builtin.filesystem import ALL_FILESYSTEM_RULES
from gosecrules.rules.builtin.injection import ALL_INJECTION_RULES
from gosecrules.rules.builtin.memory import ALL_MEMORY_RULES
from gosecrules.rules.builtin.misc import ALL_MISC_RULES
from gosecrules.rules.models import RuleDefinition

ALL_BUILTIN_RULES: Tuple[RuleDefinition, ...] = (
    *ALL_MISC_RULES,
    *ALL_INJECTION_RULES,
    *ALL_FILESYSTEM_RULES,
    *ALL_CRYPTO_RULES,
    *ALL_BLOCKLIST_RULES,
    *ALL_MEMORY_RULES,
)

BUILTIN_RULE_IDS = frozenset(r.id for r in ALL_BUILTIN_RULES)

assert len(BUILTIN_RULE_IDS) == len(ALL_BUILTIN_RULES), "duplicate rule ID in catalog"

__all__ = ["ALL_BUILTIN_RULES", "BUILTIN_RULE_IDS"]
