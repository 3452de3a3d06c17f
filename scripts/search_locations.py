"""Search stops, addresses and POIs by name and print them as JSON lines."""

from __future__ import annotations

import argparse
import json
import logging

from hafas_client import HafasClientError
from hafas_client.config import create_client_from_config, load_config


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("query")
    parser.add_argument("--config", default="config/config.yaml")
    parser.add_argument("--results", type=int, default=5)
    parser.add_argument("--no-addresses", action="store_true")
    parser.add_argument("--no-poi", action="store_true")
    args = parser.parse_args()

    config = load_config(args.config)
    logging.basicConfig(level=config.log.level)
    client = create_client_from_config(config.hafas)

    opt = {
        "results": args.results,
        "addresses": not args.no_addresses,
        "poi": not args.no_poi,
    }
    try:
        locations = client.locations(args.query, opt)
    except HafasClientError as exc:
        raise SystemExit(str(exc)) from exc

    for location in locations:
        print(json.dumps(location, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
