#!/usr/bin/env python3
"""
Seed the crop store with a handful of sample crops.

This script:
- Fetches the current crop list so existing names are not duplicated.
- Creates each sample crop through the same client the app uses.

Usage:
    python scripts/seed_crops.py --api-url http://localhost:8000/api

Notes:
- FARM_API_URL / FARM_API_TOKEN are used when the flags are omitted.
- The store has no delete operation, so re-running only adds missing names.
"""

import argparse
import logging
import sys

from farm_manager.api.crop_client import CropClient, CropClientError
from farm_manager.config import Settings, configure_logging

logger = logging.getLogger("farm_manager.seed")

SAMPLE_CROPS = [
    dict(name="Tomatoes", type="Vegetable", status="growing", plantedDate="2024-03-05", quantity=48,
         notes="Cherry variety, staked."),
    dict(name="Corn", type="Grain", status="planted", plantedDate="2024-04-12", quantity=300),
    dict(name="Wheat", type="Grain", status="ready", plantedDate="2023-10-20", harvestDate="2024-06-30"),
    dict(name="Strawberries", type="Fruit", status="harvested", plantedDate="2024-02-01",
         harvestDate="2024-05-18", quantity=60),
    dict(name="Basil", type="Herb", status="growing", quantity=24),
    dict(name="Chickpeas", type="Legume", status="planted", plantedDate="2024-04-28"),
]


def main(argv=None) -> int:
    env = Settings.from_env()
    ap = argparse.ArgumentParser(description="Seed the crop store with sample crops")
    ap.add_argument("--api-url", default=env.api_url, help="Base URL of the crop API")
    ap.add_argument("--token", default=env.api_token, help="Bearer token for the crop API")
    ap.add_argument("--timeout", type=float, default=env.api_timeout)
    ap.add_argument("--dry-run", action="store_true", help="List what would be created")
    args = ap.parse_args(argv)

    configure_logging(env)
    client = CropClient(args.api_url, token=args.token, timeout=args.timeout)

    try:
        listing = client.list()
    except CropClientError as e:
        logger.error(f"[seed] could not list crops: {e}")
        return 1
    existing = {str(c.get("name", "")).casefold() for c in listing.get("data") or [] if isinstance(c, dict)}

    created = 0
    for fields in SAMPLE_CROPS:
        if fields["name"].casefold() in existing:
            logger.info(f"[seed] skip {fields['name']} (exists)")
            continue
        if args.dry_run:
            print(f"would create {fields['name']}")
            continue
        try:
            client.create(fields)
        except CropClientError as e:
            logger.error(f"[seed] failed to create {fields['name']}: {e}")
            return 1
        created += 1
        print(f"created {fields['name']}")

    print(f"{created} crop(s) created")
    return 0


if __name__ == "__main__":
    sys.exit(main())
