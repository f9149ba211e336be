"""
Command-line entry for the SBC squad solver.

Examples:
    python solve_squad.py rating 87 86 85 88 84 89 83 85 86 84 87
    python solve_squad.py solve --target 86 --existing 89,88,87 \
        --available 84,85,86,87,88,89 --prices 84:800,85:1200,86:1800
    python solve_squad.py stats 82 83 84 84 85
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict

from config import LOG_LEVEL
from services.squad_solver_service import SquadSolverService, result_to_response

logger = logging.getLogger("sbc_solver")


def _parse_ratings(raw: str) -> list[int]:
    if not raw:
        return []
    try:
        return [int(x.strip()) for x in raw.split(",") if x.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Ratings must be comma-separated integers: {raw!r}")


def _parse_prices(raw: str) -> dict[int, int]:
    prices: dict[int, int] = {}
    if not raw:
        return prices
    for pair in raw.split(","):
        if not pair.strip():
            continue
        try:
            rating, price = pair.split(":")
            prices[int(rating)] = int(price)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Prices must look like 84:800,85:1200, got {pair!r}")
    return prices


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Squad rating calculator and SBC solver")
    subparsers = parser.add_subparsers(dest="command", required=True)

    rating_parser = subparsers.add_parser("rating", help="Team rating of a squad")
    rating_parser.add_argument("ratings", nargs="*", type=int)

    stats_parser = subparsers.add_parser("stats", help="Statistics of a rating list")
    stats_parser.add_argument("ratings", nargs="*", type=int)

    solve_parser = subparsers.add_parser("solve", help="Find ways to complete a squad")
    solve_parser.add_argument("--target", type=int, required=True, help="Target squad rating")
    solve_parser.add_argument("--existing", type=_parse_ratings, default=[], help="e.g. 89,88,87")
    solve_parser.add_argument("--available", type=_parse_ratings, default=[], help="e.g. 84,85,85,86")
    solve_parser.add_argument("--prices", type=_parse_prices, default={}, help="e.g. 84:800,85:1200")
    solve_parser.add_argument("--squad-size", type=int, default=None)
    solve_parser.add_argument("--max-solutions", type=int, default=None)
    solve_parser.add_argument(
        "--efficient",
        action="store_true",
        help="Sort by total rating points instead of price",
    )
    solve_parser.add_argument(
        "--no-table",
        action="store_true",
        help="Skip the pre-calculated combinations and always search",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    args = build_parser().parse_args(argv)
    service = SquadSolverService()

    if args.command == "rating":
        print(service.calculate_team_rating(args.ratings))
        return 0

    if args.command == "stats":
        print(json.dumps(asdict(service.get_rating_statistics(args.ratings))))
        return 0

    logger.info(
        f"Solving for {args.target} with {len(args.existing)} existing and "
        f"{len(args.available)} available players"
    )
    result = service.find_squad_solutions(
        target_rating=args.target,
        existing_ratings=args.existing,
        available_ratings=args.available,
        price_by_rating=args.prices,
        squad_size=args.squad_size,
        max_solutions=args.max_solutions,
        sort_by_price=not args.efficient,
        use_optimal_combinations=not args.no_table,
    )
    print(json.dumps(result_to_response(result), indent=2))
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
