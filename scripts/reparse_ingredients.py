"""Re-parse exported ingredient rows into structured fields.

Reads a JSON export of ingredient rows (each with an ``id`` and an
``ingredient_text``), runs the ingredient parser on every row and writes the
rows back out with ``quantity``, ``unit``, ``ingredient_name`` and
``category`` filled in. Useful after the parser's tables change.

Run with: uv run python scripts/reparse_ingredients.py ingredients.json -o reparsed.json
"""

import argparse
import json
import sys
from pathlib import Path

from mealplanner.logging_config import configure_logging, get_logger
from mealplanner.normalize.parser import parse_ingredient

logger = get_logger(__name__)

PROGRESS_EVERY = 50


def reparse_rows(rows: list[dict]) -> list[dict]:
    """Return rows with structured fields replaced by a fresh parse."""
    updated = []
    for row in rows:
        text = row.get("ingredient_text")
        if not text:
            continue

        updated.append({**row, **parse_ingredient(text).to_dict()})

        if len(updated) % PROGRESS_EVERY == 0:
            logger.info(f"Updated {len(updated)}/{len(rows)}...")

    return updated


def main() -> int:
    parser = argparse.ArgumentParser(description="Re-parse ingredient_text into structured fields")
    parser.add_argument("input", type=Path, help="JSON file with a list of ingredient rows")
    parser.add_argument("--output", "-o", type=Path, help="Write result here instead of stdout")
    args = parser.parse_args()

    # Keep stdout clean for the JSON payload when no output file is given
    configure_logging(log_level="INFO" if args.output else "WARNING")

    try:
        rows = json.loads(args.input.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.error(f"Input file not found: {args.input}")
        return 1
    except json.JSONDecodeError as e:
        logger.error(f"Input is not valid JSON: {e}")
        return 1

    if not isinstance(rows, list):
        logger.error("Input must be a JSON list of ingredient rows")
        return 1

    logger.info(f"Found {len(rows)} ingredients to re-parse")
    updated = reparse_rows(rows)

    payload = json.dumps(updated, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(payload + "\n", encoding="utf-8")
    else:
        sys.stdout.write(payload + "\n")

    logger.info(f"Done! Updated {len(updated)} ingredients.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
