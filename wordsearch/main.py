"""
Command-line entry point for searching words in a CSV letter grid.

Usage:
    python -m wordsearch.main grid.csv --words "cat, dog"
    python -m wordsearch.main grid.csv -w cat,dog --config config.yaml --output results/run1.json --verbose
"""

import argparse
import sys
from pathlib import Path

import yaml

from .session import SessionConfig, WordSearchSession


def load_config(config_path: str) -> SessionConfig:
    """Load session configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return SessionConfig(**(data or {}))


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find words in a comma-delimited letter grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example grid.csv:
  C,A,T
  X,X,X
  DOG

Example config.yaml:
  not_found_marker: not found
  separator: ", "
  blank_display: "."
  collapse_duplicate_spans: true
        """
    )
    parser.add_argument(
        "grid",
        help="Path to the comma-delimited grid file"
    )
    parser.add_argument(
        "--words", "-w",
        default="",
        help="Comma-separated words to search for"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the search report as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print the loaded grid to stdout"
    )

    args = parser.parse_args(argv)

    if args.config:
        try:
            config = load_config(args.config)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1
    else:
        config = SessionConfig()

    session = WordSearchSession(config=config)

    if not session.load_file(args.grid):
        print(session.message, file=sys.stderr)
        return 1

    if args.verbose:
        print(session.message)
        print(session.preview())
        print()

    report = session.search(args.words)
    if report is None:
        print(session.message, file=sys.stderr)
        return 1

    for line in report.as_table():
        print(line)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(report.model_dump_json(indent=2))
        if args.verbose:
            print(f"Report saved to: {output_path}")

    print()
    print(session.message)

    return 0


if __name__ == "__main__":
    sys.exit(main())
