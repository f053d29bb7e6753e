"""Injection checks (G2xx)."""

from gosecrules.rules.models import BuilderRef, RuleDefinition

SQL_FORMAT_STRING = RuleDefinition(
    id="G201",
    description="SQL query construction using format string",
    create=BuilderRef("sql_str_format"),
)

SQL_STRING_CONCAT = RuleDefinition(
    id="G202",
    description="SQL query construction using string concatenation",
    create=BuilderRef("sql_str_concat"),
)

UNESCAPED_TEMPLATE_DATA = RuleDefinition(
    id="G203",
    description="Use of unescaped data in HTML templates",
    create=BuilderRef("template_check"),
)

COMMAND_EXECUTION = RuleDefinition(
    id="G204",
    description="Audit use of command execution",
    create=BuilderRef("subproc"),
)

ALL_INJECTION_RULES = (
    SQL_FORMAT_STRING,
    SQL_STRING_CONCAT,
    UNESCAPED_TEMPLATE_DATA,
    COMMAND_EXECUTION,
)
