"""Memory safety checks (G6xx)."""

from gosecrules.rules.models import BuilderRef, RuleDefinition

IMPLICIT_ALIASING = RuleDefinition(
    id="G601",
    description="Implicit memory aliasing in RangeStmt",
    create=BuilderRef("implicit_aliasing"),
)

ALL_MEMORY_RULES = (
    IMPLICIT_ALIASING,
)
