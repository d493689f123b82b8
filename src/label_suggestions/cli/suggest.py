"""
Command-line interface for label suggestions.

Reads a JSON export of a wallet's label history and prints suggestions.

Usage:
    # Top suggestions for a send
    python -m label_suggestions.cli.suggest history.json

    # Receive intent, ten suggestions, excluding labels already chosen
    python -m label_suggestions.cli.suggest history.json --intent receive --top 10 --chosen rent

    # Full ranking as JSON
    python -m label_suggestions.cli.suggest history.json --all --format json
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from label_suggestions.config import settings
from label_suggestions.engine import SuggestionLabels
from label_suggestions.logging_config import get_logger, setup_logging
from label_suggestions.models.labels import Intent, SuggestionSnapshot
from label_suggestions.sources.static import StaticLabelSource, load_label_history


logger = get_logger(__name__)


# ============================================================================
# CLI FUNCTIONS
# ============================================================================

def build_engine(
    history_path: Path,
    intent: Intent,
    top_suggestions_count: int,
    chosen_labels: Optional[List[str]] = None,
) -> SuggestionLabels:
    """
    Load a label history file and build an engine over it.

    Args:
        history_path: Path to the JSON label history
        intent: Receive or send
        top_suggestions_count: Size of the top view
        chosen_labels: Labels to exclude from suggestions

    Returns:
        SuggestionLabels engine
    """
    history = load_label_history(history_path)
    source = StaticLabelSource(history)
    return SuggestionLabels(source, intent, top_suggestions_count, chosen_labels or [])


def write_output(snapshot: SuggestionSnapshot, show_all: bool = False, format: str = "text") -> None:
    """
    Print suggestions to stdout.

    Args:
        snapshot: Engine snapshot
        show_all: Print the full ranking instead of the top view
        format: "text" (one label per line) or "json"
    """
    if format == "json":
        print(snapshot.model_dump_json(indent=2))
        return

    suggestions = snapshot.all_suggestions if show_all else snapshot.top_suggestions
    for label in suggestions:
        print(label)


# ============================================================================
# MAIN CLI
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Label Suggestions CLI - Rank labels from a wallet label history",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Top suggestions for a send
  %(prog)s history.json

  # Receive intent, excluding labels already chosen
  %(prog)s history.json --intent receive --chosen rent --chosen coffee

  # Full ranking as JSON
  %(prog)s history.json --all --format json
        """
    )

    parser.add_argument(
        "history",
        type=str,
        help="Path to a JSON label history file"
    )

    parser.add_argument(
        "--intent",
        "-i",
        type=str,
        choices=[intent.value for intent in Intent],
        default=settings.default_intent,
        help=f"Current intent (default: {settings.default_intent})"
    )

    parser.add_argument(
        "--top",
        "-t",
        type=int,
        default=settings.default_top_suggestions_count,
        help=f"Number of top suggestions (default: {settings.default_top_suggestions_count})"
    )

    parser.add_argument(
        "--chosen",
        "-c",
        action="append",
        default=[],
        help="Label already chosen, excluded from suggestions (repeatable)"
    )

    parser.add_argument(
        "--all",
        "-a",
        action="store_true",
        help="Print all suggestions instead of the top ones"
    )

    parser.add_argument(
        "--format",
        "-f",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output"
    )

    args = parser.parse_args(argv)

    setup_logging()

    history_path = Path(args.history)

    if not history_path.is_file():
        print(f"Error: File not found: {history_path}", file=sys.stderr)
        return 1

    if args.top < 0:
        print(f"Error: --top must be >= 0, got {args.top}", file=sys.stderr)
        return 1

    try:
        engine = build_engine(history_path, Intent(args.intent), args.top, args.chosen)
        snapshot = engine.snapshot()

        if args.verbose:
            logger.info(
                "suggestions_computed",
                path=str(history_path),
                intent=snapshot.intent.value,
                top=len(snapshot.top_suggestions),
                total=len(snapshot.all_suggestions),
            )

        write_output(snapshot, show_all=args.all, format=args.format)

    except Exception as e:
        logger.error("cli_failed", error=str(e), exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
