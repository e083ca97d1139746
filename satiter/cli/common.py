import argparse

from satiter.configuration import Configuration
from satiter.dimacs import read_dimacs


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """
    Add the arguments shared by the 'solve' and 'enumerate' commands.
    """
    parser.add_argument("filename", type=str, help="Path to the input DIMACS CNF file")
    parser.add_argument(
        "--engine",
        type=str,
        default=Configuration.DEF_ENGINE,
        help="Engine (a PySAT solver name, or pysmt[:<solver>])",
    )
    parser.add_argument(
        "--variables",
        type=int,
        help="Number of variables (defaults to the largest variable in the file)",
    )
    parser.add_argument(
        "--verbosity",
        type=int,
        default=Configuration.DEF_VERBOSITY,
        help="0: silent, 1: log the session, 2: also dump the formula",
    )
    parser.add_argument(
        "--budget",
        type=int,
        default=Configuration.DEF_PROPAGATION_BUDGET,
        help="Propagation budget of each search (0 for unbounded)",
    )


def load(args: argparse.Namespace) -> tuple[list[list[int]], Configuration]:
    with open(args.filename) as f:
        clauses, nvars = read_dimacs(f)

    variables = args.variables if args.variables is not None else nvars
    config = Configuration(
        variables=variables,
        verbosity=args.verbosity,
        propagation_budget=args.budget,
        engine=args.engine,
    )
    return clauses, config
