"""Task-graph command-line tool: list next tasks, print context, verify, conclude and reflect."""

__version__ = "0.1.0"