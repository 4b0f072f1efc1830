"""Tranquil v1.0 — CLI entry point."""

import argparse
import logging

from tranquil import analyze, generate_report


def main():
    parser = argparse.ArgumentParser(description="Analyze a daily wellness assessment history")
    parser.add_argument("history", nargs="?", default="test_data.json",
                        help="JSON array of daily assessments")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    result = analyze(args.history)
    print(generate_report(result))


if __name__ == "__main__":
    main()
