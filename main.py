"""Simple entrypoint to try the outfit engine locally."""

import argparse
import json

from closet_app.app import ClosetIQApp
from models.taxonomy import OCCASIONS, SEASONS

DEMO_CLOSET = [
    {"item_id": "tee1", "user_id": "demo", "category": "t-shirt", "colors": ["white"], "seasons": ["all-season"]},
    {"item_id": "shirt1", "user_id": "demo", "category": "shirt", "colors": ["beige"], "seasons": ["spring", "fall"]},
    {"item_id": "jeans1", "user_id": "demo", "category": "jeans", "colors": ["blue"], "seasons": ["all-season"]},
    {"item_id": "pants1", "user_id": "demo", "category": "pants", "colors": ["brown"], "seasons": ["fall", "winter"]},
    {"item_id": "sneakers1", "user_id": "demo", "category": "sneakers", "colors": ["white"], "seasons": ["all-season"]},
    {"item_id": "boots1", "user_id": "demo", "category": "boots", "colors": ["tan"], "seasons": ["fall", "winter"]},
    {"item_id": "coat1", "user_id": "demo", "category": "coat", "colors": ["olive"], "seasons": ["winter"]},
    {"item_id": "dress1", "user_id": "demo", "category": "dress", "colors": ["black"], "seasons": ["summer"]},
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Suggest outfits from a demo closet.")
    parser.add_argument("--occasion", choices=OCCASIONS, default="casual")
    parser.add_argument("--season", choices=SEASONS, default=None)
    parser.add_argument("--explain", action="store_true")
    args = parser.parse_args()

    app = ClosetIQApp()
    matches = app.closet_tools.generate_outfit_matches(
        items=DEMO_CLOSET, occasion=args.occasion, season=args.season, explain=args.explain
    )
    for match in matches:
        summary = {
            "items": [item["item_id"] for item in match["outfit"]],
            "confidence": round(match["confidence"], 3),
            "explanation": match["explanation"],
        }
        print(json.dumps(summary))


if __name__ == "__main__":
    main()
