"""Rich terminal reporter for a generated rule list."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gosecrules.rules.builtin import ALL_BUILTIN_RULES
from gosecrules.rules.models import RuleDefinition, RuleList

_STATUS_STYLE = {
    "active": "bold green",
    "suppressed": "bold yellow",
    "excluded": "dim",
}


def rule_status(rule_list: RuleList, rule_id: str) -> str:
    """Return ``active``, ``suppressed`` (present but flagged) or ``excluded``."""
    if rule_id not in rule_list.rules:
        return "excluded"
    if rule_list.is_suppressed(rule_id):
        return "suppressed"
    return "active"


def render(
    rule_list: RuleList,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
    catalog: Sequence[RuleDefinition] = ALL_BUILTIN_RULES,
) -> None:
    """Print the rule list to the terminal using Rich."""
    console = console or Console(stderr=True)

    table = Table(
        title="gosecrules",
        title_style="bold",
        border_style="dim",
    )
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Category", style="magenta")
    table.add_column("Description")
    table.add_column("Status", justify="center")

    for rule in catalog:
        if rule.id not in rule_list.rule_suppressed:
            continue
        status = rule_status(rule_list, rule.id)
        table.add_row(
            rule.id,
            rule.category,
            rule.description,
            Text(status, style=_STATUS_STYLE[status]),
        )

    console.print(table)

    if show_summary:
        _print_summary(console, rule_list)


def _print_summary(console: Console, rule_list: RuleList) -> None:
    console.print()
    console.print(f"[dim]Catalog:[/dim]     {len(rule_list.rule_suppressed)}")
    console.print(f"[dim]Active:[/dim]      {len(rule_list.active_ids)}")
    console.print(f"[dim]Suppressed:[/dim]  {len(rule_list.suppressed_ids)}")
