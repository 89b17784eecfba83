#!/usr/bin/env python3
"""Run the fleet simulation for a number of ticks and dump the result.

Logs in as the demo admin, enables simulation mode, advances the fleet
tick by tick and prints the final vehicles, alerts and notifications.

Usage
-----
::

    python scripts/run_simulation.py --ticks 50 --seed 7
    python scripts/run_simulation.py --weather Rain --traffic high --json

Options::

    --ticks N          Number of ticks to run (default: 20)
    --seed N           Seed for the random generator (default: NEUROFLEET_SEED or random)
    --weather COND     Weather condition, e.g. "Rain" (default: seed weather)
    --traffic LEVEL    Congestion level: low, moderate or high
    --json             Output as machine-readable JSON
    --export-dir DIR   Also write a fleet JSON export into DIR
    -v, --verbose      Enable debug logging
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from neurofleet import FleetConfig, FleetDashboard  # noqa: E402
from neurofleet.export import export_data, save_export  # noqa: E402
from neurofleet.models import (  # noqa: E402
    CongestionLevel,
    ExportDataType,
    ExportFormat,
    TrafficReading,
    WeatherReading,
)

_ADMIN_EMAIL = "admin@neurofleetx.com"
_ADMIN_PASSWORD = "admin123"


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the neurofleet telemetry simulation.")
    parser.add_argument("--ticks", type=int, default=20, help="Number of ticks to run")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--weather", default=None, help='Weather condition, e.g. "Rain"')
    parser.add_argument(
        "--traffic",
        choices=[level.value for level in CongestionLevel],
        default=None,
        help="Congestion level",
    )
    parser.add_argument("--json", action="store_true", help="Output JSON")
    parser.add_argument("--export-dir", type=Path, default=None, help="Write a fleet JSON export here")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def _print_text(snapshot: dict[str, Any]) -> None:
    print(f"Ticks run: {snapshot['ticks']}")
    print("\nVehicles:")
    for v in snapshot["vehicles"]:
        print(
            f"  #{v['id']:<3} {v['name']:<22} {v['status']:<12} "
            f"battery={v['battery']:6.2f}%  speed={v['speed']:6.2f} km/h  "
            f"mileage={v['maintenance']['mileage']:.1f}"
        )
    print("\nAlerts:")
    for a in snapshot["alerts"]:
        print(f"  [{a['priority']}] {a['message']}")
    print("\nNotifications (newest first):")
    for n in snapshot["notifications"]:
        print(f"  ({n['type']}) {n['message']}")


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides: dict[str, Any] = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    config = FleetConfig.from_env(**overrides)
    dashboard = FleetDashboard(config, rng=random.Random(config.seed))
    dashboard.login(_ADMIN_EMAIL, _ADMIN_PASSWORD)

    store = dashboard.store
    if args.weather is not None:
        store.set_weather(WeatherReading(condition=args.weather))
    if args.traffic is not None:
        store.set_traffic(TrafficReading(congestion_level=CongestionLevel(args.traffic)))
    dashboard.set_simulation_mode(True)

    for _ in range(args.ticks):
        dashboard.tick()

    snapshot = {
        "ticks": args.ticks,
        "vehicles": [v.to_json_dict() for v in store.vehicles],
        "alerts": [a.to_json_dict() for a in store.alerts],
        "notifications": [n.to_json_dict() for n in store.notifications],
    }
    if args.json:
        print(json.dumps(snapshot, indent=2))
    else:
        _print_text(snapshot)

    if args.export_dir is not None:
        args.export_dir.mkdir(parents=True, exist_ok=True)
        path = save_export(export_data(store, ExportFormat.JSON, ExportDataType.FLEET), args.export_dir)
        print(f"\nWrote {path}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
