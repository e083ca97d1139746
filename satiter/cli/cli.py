import argparse
from typing import Optional, Sequence

from satiter.cli import enumeration, solving
from satiter.log import init_logger, logger
from satiter.satexception import SATException


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="satiter CLI: solve CNF formulas and enumerate their models.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Run '%(prog)s command --help' for more information on a specific command.",
    )
    parser.add_argument("--log", type=str, help="Also write the log to this file")

    subparsers = parser.add_subparsers(
        dest="command", help="satiter command", required=True
    )

    solve_parser = subparsers.add_parser("solve", help="Find one model of a DIMACS file")
    solving.add_arguments(solve_parser)
    enumerate_parser = subparsers.add_parser(
        "enumerate", help="Enumerate the models of a DIMACS file"
    )
    enumeration.add_arguments(enumerate_parser)

    return parser.parse_args(argv)


def cli(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    init_logger(args.log, verbose=args.verbosity >= 2)

    try:
        if args.command == "solve":
            solving.run(args)
        elif args.command == "enumerate":
            enumeration.run(args)
        else:
            logger.error(f"Unknown command: {args.command}")
            return 1
    except (SATException, OSError) as e:
        logger.error(str(e))
        return 1

    return 0
