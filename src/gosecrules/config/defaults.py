"""Starter .gosecrules.toml template."""

DEFAULT_TOML = """\
# gosecrules configuration
version = "1.0"

[rules]
# include = ["G101", "G401"]   # empty = every catalog rule
# exclude = ["G104"]
track_suppressions = false     # keep excluded rules in the report, flagged

[output]
format = "terminal"            # terminal | json
show_summary = true
"""
