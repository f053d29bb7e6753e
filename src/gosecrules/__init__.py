"""gosecrules: rule catalog and rule selection for a Go security scanner."""

__version__ = "0.1.0"
