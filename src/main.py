"""
Main entry point for replaying a recorded LOK solution.

Usage:
    python -m src.main replay.yaml
    python -m src.main replay.yaml --output results/run1.json --verbose
"""

import argparse
import sys
from pathlib import Path

from .engine import PuzzleError
from .replay import load_config, run_replay
from .utils.logger import configure_logging


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Check a recorded LOK move log against its puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example replay.yaml:
  puzzle: |
    LOK_
  moves:
    - {kind: blacken, row: 0, col: 0}
    - {kind: blacken, row: 0, col: 1}
    - {kind: blacken, row: 0, col: 2}
    - {kind: blacken, row: 0, col: 3}
  log_level: INFO
        """
    )
    parser.add_argument(
        "config",
        help="Path to YAML replay file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the result JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print the final board"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    configure_logging(config.log_level)

    try:
        result = run_replay(config)
    except PuzzleError as e:
        print(f"Error replaying {args.config}: {e}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.model_dump_json(indent=2))
        if args.verbose:
            print(f"Result saved to: {output_path}")

    if args.verbose and result.board is not None:
        print(result.board)
        print()

    outcome = result.outcome
    print("=== Replay Summary ===")
    print(f"Board: {result.width}x{result.height}")
    print(f"Moves recorded: {result.moves_recorded}")
    if result.rejected_letter_changes:
        print(f"Ignored letter changes: {result.rejected_letter_changes}")
    print(f"Outcome: {outcome.status}")
    if outcome.error is not None:
        print(f"Illegal move #{outcome.error.move_index}: {outcome.error.code}")
        print(f"  {outcome.error.message}")
    elif outcome.partial_keyword:
        print(f"Unfinished keyword: {outcome.partial_keyword}")
    elif outcome.pending_state:
        print(f"Still executing: {outcome.pending_state}")

    return 0 if outcome.is_correct else 1


if __name__ == "__main__":
    sys.exit(main())
