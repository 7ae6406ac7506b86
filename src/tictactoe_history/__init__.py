"""Tic-tac-toe engine with move history, time travel and sortable move list."""

__version__ = "0.1.0"
