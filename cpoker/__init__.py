"""Five-card poker dealing and hand evaluation, with a command that deals one hand."""

__version__ = "0.1.0"