"""
CLI module for label suggestions.

Provides a command-line tool to rank labels from an exported label history.
"""

from label_suggestions.cli.suggest import main as suggest_main

__all__ = ["suggest_main"]
