"""Command-line interface for Fontier."""

from .parser import build_arg_parser
from .runner import main, run_cli

__all__ = ["build_arg_parser", "main", "run_cli"]
