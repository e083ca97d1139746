import argparse
from itertools import islice
from time import time

from satiter.asynchronous import AsyncWrapper
from satiter.cli import common
from satiter.dimacs import format_solution
from satiter.iterator import SolutionIterator
from satiter.session import Session
from satiter.log import logger


def add_arguments(parser: argparse.ArgumentParser) -> None:
    common.add_arguments(parser)
    parser.add_argument(
        "--limit", type=int, help="Stop after this many models (default: all)"
    )
    parser.add_argument(
        "--async_queue_size",
        type=int,
        help="Search on a worker thread, with at most this many models queued (0 for no limit)",
    )


def run(args: argparse.Namespace) -> int:
    clauses, config = common.load(args)

    t0 = time()
    iterator = SolutionIterator(Session.open(clauses, config))
    if args.async_queue_size is not None:
        solutions = iter(AsyncWrapper(iterator, args.async_queue_size))
    else:
        solutions = iterator

    n = 0
    try:
        for solution in islice(solutions, args.limit):
            print(format_solution(solution))
            n += 1
    finally:
        # stops the worker thread first, if any
        solutions.close()
        iterator.close()

    print(f"c models: {n}")
    logger.info(f"state: {iterator.state.value}")
    logger.info(f"time: {time() - t0}")
    return n
