#!/usr/bin/env python3
"""
Recommend an outfit from a wardrobe file for one weather reading.

The wardrobe file is a JSON list of stored records (see outfind.wardrobe).
The outfit is printed to stdout as JSON; logs go to stderr.

Usage:
    PYTHONPATH=src python scripts/recommend_outfit.py --temperature 12 --rainy
    PYTHONPATH=src python scripts/recommend_outfit.py --wardrobe my.json --temperature 27 --reroll 3
    PYTHONPATH=src python scripts/recommend_outfit.py --temperature 18 --explain
"""

import argparse
import json
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "src"))

from config import get_settings  # noqa: E402
from core.logging import configure_logging_from_settings, get_logger  # noqa: E402
from outfind import (  # noqa: E402
    OutfitSelector,
    WeatherObservation,
    classify_weather,
    wardrobe_from_records,
)

logger = get_logger(__name__)


def load_wardrobe(path: Path):
    """Read wardrobe records from ``path``; a missing file is an empty wardrobe."""
    if not path.exists():
        logger.warning("wardrobe_file_missing", path=str(path))
        return []
    with open(path, "r", encoding="utf-8") as f:
        try:
            records = json.load(f)
        except json.JSONDecodeError as e:
            raise SystemExit(f"{path}: not valid JSON ({e})")
    if not isinstance(records, list):
        raise SystemExit(f"{path}: expected a JSON list of wardrobe records")
    return wardrobe_from_records(records)


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Recommend an outfit for the current weather")
    parser.add_argument("--wardrobe", type=Path, default=settings.wardrobe_file,
                        help=f"Wardrobe JSON file (default: {settings.wardrobe_file})")
    parser.add_argument("--temperature", type=float, required=True, help="Temperature in C")
    parser.add_argument("--rainy", action="store_true", help="Precipitation at the location")
    parser.add_argument("--location", default="default", help="Location id (default: default)")
    parser.add_argument("--reroll", type=int, default=0, help="Reroll counter (default: 0)")
    parser.add_argument("--json-logs", action="store_true", default=settings.json_logs,
                        help="Emit JSON log lines")
    parser.add_argument("--explain", action="store_true", help="Print the selection breakdown")
    args = parser.parse_args()

    if args.reroll < 0:
        parser.error("--reroll must be >= 0")

    if args.json_logs != settings.json_logs:
        settings = settings.model_copy(update={"json_logs": args.json_logs})
    configure_logging_from_settings(settings)

    wardrobe = load_wardrobe(args.wardrobe)
    weather = classify_weather(WeatherObservation(temperature_c=args.temperature, precipitation=args.rainy))
    logger.info("recommending", items=len(wardrobe), weather=weather.value, location_id=args.location)

    selector = OutfitSelector()
    if args.explain:
        result = selector.explain(wardrobe, weather, args.location, args.reroll)
    else:
        result = selector.select(wardrobe, weather, args.location, args.reroll).to_dict()
        result["weather"] = weather.value

    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
