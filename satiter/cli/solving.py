import argparse
from time import time

from satiter.cli import common
from satiter.dimacs import format_solution
from satiter.log import logger
from satiter.session import Session, Verdict
from satiter.solution import get_solution

STATUS = {
    Verdict.SATISFIABLE: "s SATISFIABLE",
    Verdict.UNSATISFIABLE: "s UNSATISFIABLE",
    Verdict.UNKNOWN: "s UNKNOWN",
}


def add_arguments(parser: argparse.ArgumentParser) -> None:
    common.add_arguments(parser)


def run(args: argparse.Namespace) -> Verdict:
    clauses, config = common.load(args)

    t0 = time()
    with Session.open(clauses, config) as session:
        verdict = session.run()
        print(STATUS[verdict])
        if verdict is Verdict.SATISFIABLE:
            print(format_solution(get_solution(session)))

    logger.info(f"time: {time() - t0}")
    return verdict
