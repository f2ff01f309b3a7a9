#!/usr/bin/env python3
"""Management commands for the ESG sustainability API.

Usage locally:
    python -m scripts.manage seed                               # insert demo data
    python -m scripts.manage generate-reports --year 2024 --quarter 2
    python -m scripts.manage generate-reports --year 2024 --quarter 2 --company-id 1

``generate-reports`` runs automatic report generation for every company
(or just one), exactly as ``POST /api/v1/sustainability-reports/generate``
does. Like the endpoint, it does not skip periods that already have a report.
"""

import argparse
import logging
import sys
from pathlib import Path

# Ensure the project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from esg_api.container import AppContainer
from esg_api.errors import ESGAPIError
from esg_api.seed import seed_demo_data

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("manage")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="ESG sustainability API management commands.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("seed", help="Insert the demo company, records and users")

    gen = sub.add_parser("generate-reports", help="Generate quarterly reports")
    gen.add_argument("--year", type=int, required=True)
    gen.add_argument("--quarter", type=int, choices=(1, 2, 3, 4), required=True)
    gen.add_argument("--company-id", type=int, default=None, help="Limit to one company")

    return parser.parse_args(argv)


def run_seed(container: AppContainer) -> int:
    counts = seed_demo_data(container.db_session())
    logger.info("Seed result: %s", counts)
    return 0


def run_generate_reports(container: AppContainer, year: int, quarter: int, company_id=None) -> int:
    if company_id is not None:
        company_ids = [company_id]
    else:
        company_ids = [c.id for c in container.company_repo().get_all(limit=10_000)]

    svc = container.report_service()
    failures = 0
    for cid in company_ids:
        try:
            report = svc.generate(cid, year, quarter)
            logger.info("Company %s: report %s scored %s", cid, report.id, report.esg_score)
        except ESGAPIError as exc:
            failures += 1
            logger.error("Company %s: %s", cid, exc.message)

    logger.info("Generated %d of %d reports for %dQ%d", len(company_ids) - failures, len(company_ids), year, quarter)
    return 1 if failures else 0


def main(argv=None) -> int:
    args = parse_args(argv)
    container = AppContainer()
    container.init_resources()
    try:
        if args.command == "seed":
            return run_seed(container)
        return run_generate_reports(container, args.year, args.quarter, args.company_id)
    finally:
        container.shutdown_resources()


if __name__ == "__main__":
    sys.exit(main())
