#!/usr/bin/env python3
"""Generate a sample marketplace and print or export each seller's dashboard.

Examples::

    python scripts/seller_report.py --sellers 3 --seed 42
    python scripts/seller_report.py --output json --add-on professional_photo
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from seller_dashboard.config import DashboardConfig
from seller_dashboard.dashboard import build_admin_stats, build_seller_dashboard
from seller_dashboard.logging import setup_logging
from seller_dashboard.pricing.savings import DEFAULT_ADD_ONS
from seller_dashboard.scenarios import SellerPortfolioScenario
from seller_dashboard.session import SessionContext
from seller_dashboard.sinks import ConsoleSink, JsonFileSink

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    config = DashboardConfig.from_env()

    parser = argparse.ArgumentParser(
        description="Build seller dashboards for a generated marketplace"
    )
    parser.add_argument(
        "--sellers",
        type=int,
        default=config.generator.num_sellers,
        help=f"Number of sellers to generate (default: {config.generator.num_sellers})",
    )
    parser.add_argument(
        "--buyers",
        type=int,
        default=config.generator.num_buyers,
        help=f"Number of buyers to generate (default: {config.generator.num_buyers})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed if config.seed is not None else 42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--add-on",
        action="append",
        default=[],
        choices=sorted(DEFAULT_ADD_ONS),
        help="Add-on to include in the savings comparison (repeatable)",
    )
    parser.add_argument(
        "--output",
        choices=["console", "json"],
        default="console",
        help="Where to write the reports (default: console)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output.report_dir,
        help=f"Directory for JSON reports (default: {config.output.report_dir})",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default="standard",
        help="Log format (default: standard)",
    )
    args = parser.parse_args()

    setup_logging(config.log_level, args.log_format)

    scenario = SellerPortfolioScenario(
        num_sellers=args.sellers,
        properties_per_seller=config.generator.properties_per_seller,
        num_buyers=args.buyers,
        seed=args.seed,
        locale=config.generator.locale,
    )
    store = scenario.generate()

    if args.output == "json":
        sink = JsonFileSink(args.output_dir, pretty=config.output.pretty_json)
    else:
        sink = ConsoleSink(pretty=True)

    dashboards = [
        build_seller_dashboard(
            SessionContext(user_id=seller.user_id, now=scenario.now),
            store,
            add_ons=args.add_on,
            advisor_config=config.advisor,
        )
        for seller in scenario.sellers
    ]
    sink.write_batch("seller_dashboards", dashboards)

    admin = SessionContext(user_id="admin", is_admin=True, now=scenario.now)
    sink.write_batch("platform_stats", [build_admin_stats(admin, store)])

    sink.close()


if __name__ == "__main__":
    main()
