"""This module validates CNF formulas and streams them into an engine.

A formula is a list (or tuple) of clauses, a clause is a list (or tuple, or
1-D integer numpy array) of non-zero integer literals. The clause terminator
0 is never part of the input: it is appended here, once per clause.
"""

from numbers import Integral
from typing import TYPE_CHECKING, Any, Sequence

import numpy as np

from satiter.satexception import SATInputException

if TYPE_CHECKING:  # avoid circular import
    from satiter.engines import Engine

MAX_VARIABLE = 2**31 - 1


def check_formula(formula: Any) -> None:
    """Checks that a formula is a sequence of clauses, before any engine is created.

    Only the shape is checked here: literals are validated while the clauses
    are streamed into the engine.
    """
    if not isinstance(formula, (list, tuple)):
        raise SATInputException(
            SATInputException.NOT_A_SEQUENCE, type(formula).__name__
        )

    for i, clause in enumerate(formula):
        if not _is_clause(clause):
            raise SATInputException(
                SATInputException.NOT_A_SEQUENCE,
                "{} (clause {})".format(type(clause).__name__, i),
            )


def check_literal(literal: Any) -> int:
    """Returns the literal as a Python int, raising SATInputException if it is invalid."""
    if isinstance(literal, (bool, np.bool_)) or not isinstance(literal, Integral):
        raise SATInputException(SATInputException.NOT_AN_INTEGER, repr(literal))

    literal = int(literal)
    if literal == 0:
        raise SATInputException(SATInputException.ZERO_LITERAL)
    if abs(literal) > MAX_VARIABLE:
        raise SATInputException(SATInputException.LITERAL_OUT_OF_RANGE, literal)
    return literal


def _is_clause(clause: Any) -> bool:
    if isinstance(clause, np.ndarray):
        return clause.ndim == 1
    return isinstance(clause, (list, tuple))


def _clause_items(clause: Any) -> Sequence[Any]:
    if isinstance(clause, np.ndarray) and clause.ndim == 1:
        return clause.tolist()
    if isinstance(clause, (list, tuple)):
        return clause

    raise SATInputException(SATInputException.NOT_A_SEQUENCE, type(clause).__name__)


def add_clause(engine: "Engine", clause: Any) -> None:
    """Streams a single clause into the engine, literal by literal, followed by the terminator."""
    for literal in _clause_items(clause):
        engine.add(check_literal(literal))
    engine.add(0)


def add_clauses(engine: "Engine", formula: Any) -> int:
    """Streams a whole formula into the engine.

    Clauses are forwarded as soon as they are validated: if a clause is
    rejected, the previous ones are already in the engine, which must then be
    discarded by the caller.

    Returns:
        The number of clauses added.
    Raises:
        SATInputException on the first malformed clause or literal.
    """
    check_formula(formula)
    for i, clause in enumerate(formula):
        try:
            add_clause(engine, clause)
        except SATInputException as e:
            e.message = "{} (clause {})".format(e.message, i)
            raise
    return len(formula)
