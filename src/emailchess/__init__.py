"""Two-player chess rule engine with a select-then-move game controller."""

__version__ = "0.1.0"
