"""This module implements the public entry points.

    solve([[1, -5, 4], [-1, 5, 3, 4], [-3, -4]])   # one model, "UNSAT" or "UNKNOWN"
    for solution in itersolve([[1, 2], [-1, -2]]):  # [1, -2] and [-1, 2], in any order
        ...

"""

from typing import TYPE_CHECKING, Any, Optional, Union

from satiter.configuration import Configuration
from satiter.iterator import SolutionIterator
from satiter.session import Session, Verdict
from satiter.solution import get_solution

if TYPE_CHECKING:  # avoid circular import
    from satiter.engines import EngineFactory
    from satiter.scratch import Allocator

UNSAT = "UNSAT"
UNKNOWN = "UNKNOWN"


def solve(
    formula: Any,
    variables: Optional[int] = None,
    verbosity: int = Configuration.DEF_VERBOSITY,
    propagation_budget: int = Configuration.DEF_PROPAGATION_BUDGET,
    engine: Union[str, "EngineFactory"] = Configuration.DEF_ENGINE,
) -> Union[list[int], str]:
    """Solves a CNF formula.

    Args:
        formula: list of clauses, each a list of non-zero integers
        variables: number of variables (models cover at least 1..variables)
        verbosity: 0 is silent, 1 logs the session, 2 also dumps the formula
        propagation_budget: maximum number of propagations, 0 for unbounded
        engine: the engine name or factory (see satiter.engines.get_engine)

    Returns:
        A model (list of signed integers, one per variable), "UNSAT", or
        "UNKNOWN" if the budget was exhausted.
    Raises:
        SATInputException: malformed formula
        SATResourceException: out of memory
        SATEngineException: the engine returned an unexpected result code
    """
    config = Configuration(variables, verbosity, propagation_budget, engine)

    with Session.open(formula, config) as session:
        verdict = session.run()
        if verdict is Verdict.SATISFIABLE:
            return get_solution(session)
        elif verdict is Verdict.UNSATISFIABLE:
            return UNSAT
        else:
            return UNKNOWN


def itersolve(
    formula: Any,
    variables: Optional[int] = None,
    verbosity: int = Configuration.DEF_VERBOSITY,
    propagation_budget: int = Configuration.DEF_PROPAGATION_BUDGET,
    engine: Union[str, "EngineFactory"] = Configuration.DEF_ENGINE,
    allocator: Optional["Allocator"] = None,
) -> SolutionIterator:
    """Returns an iterator over all the models of a CNF formula.

    The formula is validated and loaded before this function returns. The
    iteration stops without error when no model is left, or when a search
    exhausts the propagation budget.

    Args:
        allocator: allocator of the blocking-clause scratch buffer
        (the other arguments are the same as solve)

    Returns:
        A SolutionIterator yielding distinct models.
    """
    config = Configuration(variables, verbosity, propagation_budget, engine, allocator)
    return SolutionIterator(Session.open(formula, config))
