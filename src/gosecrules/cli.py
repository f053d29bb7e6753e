"""gosecrules CLI: Typer application with rules and init commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from gosecrules import __version__

app = typer.Typer(
    name="gosecrules",
    help="Inspect the security rule catalog and the rule set a scan would run.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _split_ids(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [r.strip() for r in value.split(",") if r.strip()]


# ── rules ─────────────────────────────────────────────────────────────────────


@app.command()
def rules(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gosecrules.toml"),
    include: Optional[str] = typer.Option(None, "--include", "-i", help="Comma-separated rule IDs to keep"),
    exclude: Optional[str] = typer.Option(None, "--exclude", "-e", help="Comma-separated rule IDs to suppress"),
    track_suppressions: bool = typer.Option(
        False, "--track-suppressions", help="Keep suppressed rules in the report, flagged"
    ),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Show which catalog rules are active and which are suppressed."""
    from gosecrules.config.loader import ConfigError, load_config
    from gosecrules.config.schema import OUTPUT_FORMATS
    from gosecrules.output import json_report, terminal
    from gosecrules.rules.registry import build_rule_list, unknown_rule_ids

    _setup_logging(verbose)

    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    cfg.rules.include.extend(_split_ids(include))
    cfg.rules.exclude.extend(_split_ids(exclude))
    if track_suppressions:
        cfg.rules.track_suppressions = True

    unknown = unknown_rule_ids(cfg.rules.include + cfg.rules.exclude)
    if unknown:
        logger.warning("Unknown rule IDs ignored: %s", ", ".join(unknown))

    rule_list = build_rule_list(cfg)

    if cfg.output.format == "json":
        print(json_report.render(rule_list))
    else:
        terminal.render(rule_list, show_summary=cfg.output.show_summary, console=console)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
) -> None:
    """Generate a starter .gosecrules.toml in the current directory."""
    from gosecrules.config.defaults import DEFAULT_TOML
    from gosecrules.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists() and not force:
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gosecrules {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """gosecrules: rule catalog and rule selection for Go security scans."""
