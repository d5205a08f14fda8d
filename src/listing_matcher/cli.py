"""Command-line entry points.

    listing-matcher [--threshold T] PRODUCTS LISTINGS RESULTS [REJECTS]
    listing-matcher serve [--host H] [--port P]
"""

from __future__ import annotations

import argparse
import logging
import socket
import sys
from collections.abc import Sequence

from .config import settings
from .datafiles import DataFileError, read_listings, read_products, write_rejects, write_results
from .pipeline import run_matching

logger = logging.getLogger(__name__)


def _threshold(value: str) -> float:
    try:
        threshold = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not 0.0 <= threshold <= 1.0:
        raise argparse.ArgumentTypeError("threshold must be between 0.0 and 1.0")
    return threshold


def _match_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="listing-matcher",
        description="Match product listings to known products.",
        epilog="Use 'listing-matcher serve --help' to run the HTTP API instead.",
    )
    parser.add_argument("products", help="JSON-lines file of products")
    parser.add_argument("listings", help="JSON-lines file of listings")
    parser.add_argument("results", help="Output file for matched results")
    parser.add_argument("rejects", nargs="?", help="Output file for rejected listings")
    parser.add_argument(
        "--threshold",
        type=_threshold,
        default=settings.match_threshold,
        help="Minimum match score, 0.0 - 1.0 (default: %(default)s)",
    )
    return parser


def _serve_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="listing-matcher serve", description="Run the HTTP API.")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    return parser


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _port_in_use(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        try:
            s.bind((host, port))
            return False
        except OSError:
            return True


def run_match(args: argparse.Namespace) -> int:
    try:
        logger.info("Reading %s...", args.products)
        products = read_products(args.products)
        logger.info("Reading %s...", args.listings)
        listings = read_listings(args.listings)
        logger.info("Found %d products and %d listings.", len(products), len(listings))

        report = run_matching(products, listings, args.threshold, settings.manufacturer_aliases)

        logger.info("Writing results to %s...", args.results)
        write_results(args.results, report.results)
        if args.rejects:
            logger.info("Writing %d rejects to %s...", report.reject_count, args.rejects)
            write_rejects(args.rejects, report.rejects)
    except DataFileError as e:
        logger.error("%s", e)
        return 1
    return 0


def run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    if _port_in_use(args.host, args.port):
        logger.error("Port %d is already in use. Kill the existing server first.", args.port)
        return 1
    uvicorn.run("listing_matcher.main:app", host=args.host, port=args.port)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    _configure_logging()
    if argv and argv[0] == "serve":
        return run_serve(_serve_parser().parse_args(argv[1:]))
    return run_match(_match_parser().parse_args(argv))
