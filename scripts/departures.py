"""Print the next departures (or arrivals) at a stop."""

from __future__ import annotations

import argparse
import logging
from typing import Any

from hafas_client import CACHE, SERVER_TIMING, HafasClientError
from hafas_client.config import create_client_from_config, load_config


def _format_row(entry: dict[str, Any]) -> str:
    line = (entry.get("line") or {}).get("name") or "?"
    when = entry.get("when") or entry.get("plannedWhen") or "--"
    clock = when[11:16] if len(when) >= 16 else when  # HH:MM out of ISO-8601
    delay = entry.get("delay")
    delay_text = f" (+{delay // 60})" if isinstance(delay, int) and delay > 0 else ""
    target = entry.get("direction") or entry.get("provenance") or ""
    return f"{clock}{delay_text}  {line:<6} {target}"


def _board_entries(data: Any, arrivals: bool) -> list[dict[str, Any]]:
    if not isinstance(data, dict):
        return list(data)
    # arrivals come back under "departures" unless the client uses the /arrivals path
    if arrivals and "arrivals" in data:
        return data["arrivals"]
    return data.get("departures", [])


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("stop_id")
    parser.add_argument("--config", default="config/config.yaml")
    parser.add_argument("--arrivals", action="store_true")
    parser.add_argument("--duration", type=int, default=30)
    parser.add_argument("--results", type=int, default=10)
    args = parser.parse_args()

    config = load_config(args.config)
    logging.basicConfig(level=config.log.level)
    client = create_client_from_config(config.hafas)

    board = client.arrivals if args.arrivals else client.departures
    try:
        data = board(args.stop_id, {"duration": args.duration, "results": args.results})
    except HafasClientError as exc:
        raise SystemExit(str(exc)) from exc

    for entry in _board_entries(data, args.arrivals):
        print(_format_row(entry))
    print(f"-- cache: {data[CACHE] or 'n/a'}, server timing: {data[SERVER_TIMING] or 'n/a'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
