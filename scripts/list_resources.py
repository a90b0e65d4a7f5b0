#!/usr/bin/env python3
"""
List or fetch payments API resources and print them as JSON lines.

Examples:
    python scripts/list_resources.py order_returns --limit 5
    python scripts/list_resources.py report_runs --id frr_123
    python scripts/list_resources.py checkout_sessions --mock --expand customer
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add repo root to path so `payments_client` imports work when running from scripts/
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError

from payments_client import ClientConfig, MockBackend, PaymentsClient, PaymentsClientError
from payments_client.config import config_from_env, load_client_config
from payments_client.contracts import ListParams, Params

LISTABLE = (
    "balance_transactions",
    "checkout_sessions",
    "exchange_rates",
    "order_returns",
    "report_runs",
    "scheduled_query_runs",
)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_config(config_path: Optional[Path], mock: bool) -> ClientConfig:
    if config_path is not None:
        return load_client_config(config_path)
    config = config_from_env()
    if mock and not config.api_key:
        config = config.model_copy(update={"api_key": "sk_test_mock"})
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="List or fetch payments API resources")
    parser.add_argument("resource", choices=LISTABLE, help="Resource collection to read")
    parser.add_argument("--id", default=None, help="Fetch a single object instead of listing")
    parser.add_argument("--limit", type=int, default=None, help="Page size for list requests")
    parser.add_argument("--max-items", type=int, default=None, help="Stop after this many items")
    parser.add_argument("--expand", action="append", default=None, help="Field to expand (repeatable)")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to client config YAML (default: PAYMENTS_* environment variables)",
    )
    parser.add_argument("--mock", action="store_true", help="Use the in-memory mock backend")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = build_config(args.config, args.mock)
        backend = MockBackend() if args.mock else None
        with PaymentsClient(config, backend=backend) as client:
            resource_client = getattr(client, args.resource)

            if args.id:
                obj = resource_client.get(args.id, Params(expand=args.expand))
                print(obj.model_dump_json(exclude_none=True))
                return 0

            expand = [f"data.{field}" for field in args.expand] if args.expand else None
            iterator = resource_client.list(ListParams(limit=args.limit, expand=expand))
            count = 0
            for item in iterator:
                print(item.model_dump_json(exclude_none=True))
                count += 1
                if args.max_items is not None and count >= args.max_items:
                    break
            logger.info("Printed %d %s", count, args.resource)
        return 0
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
    except FileNotFoundError as e:
        logger.error("Config error: %s", e)
        return 2
    except ValidationError as e:
        logger.error("Invalid arguments or config: %s", e)
        return 2
    except PaymentsClientError as e:
        logger.error("Request failed: %s: %s", type(e).__name__, str(e), exc_info=args.verbose)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
