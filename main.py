# main.py
"""
FaaS Inspector command line entry point.
Runs one inspection pass in the current environment and prints the record.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from probe.config import load_config
from probe.inspector import Inspector

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def run_probe(config: dict) -> dict:
    """One full pass: construct, inspect, finish."""
    inspector = Inspector.from_config(config)
    inspector.inspect_all()
    return inspector.finish()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect the current FaaS runtime environment")
    parser.add_argument("--config", default=None, help="JSON config file")
    parser.add_argument("--json", action="store_true", help="print the record as JSON")
    parser.add_argument("--memory", action="store_true", help="also collect memory totals")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    setup_logging(config.get("logging", {}).get("level", "INFO"))
    if args.memory:
        config.setdefault("collectors", {})["memory"] = True

    record = run_probe(config)

    if args.json:
        print(json.dumps(record, indent=2, sort_keys=True))
    else:
        from dashboard.cli import RecordDashboard
        RecordDashboard(record).show()

    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
