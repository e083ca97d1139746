"""This module implements the solving session.

A Session owns exactly one engine from its creation (with the formula
ingested) to its teardown. Sessions are never shared: concurrent solving
requires independent sessions.
"""

import logging
from enum import IntEnum
from typing import Any, Optional, Sequence

from satiter.configuration import Configuration
from satiter.dimacs import format_dimacs
from satiter.engines import Engine, get_engine
from satiter.engines import engine as codes
from satiter.ingestion import add_clause, add_clauses, check_formula
from satiter.log import get_sublogger
from satiter.satexception import (
    SATEngineException,
    SATResourceException,
    SATRuntimeException,
)

logger = get_sublogger("session")


class Verdict(IntEnum):
    SATISFIABLE = codes.SATISFIABLE
    UNSATISFIABLE = codes.UNSATISFIABLE
    UNKNOWN = codes.UNKNOWN


class Session:
    """This class owns an engine loaded with a formula.

    Attributes:
        engine: the engine (None once the session is closed)
        config: the Configuration of the session
        verdict: the Verdict of the last run (None before the first one)
    """

    def __init__(self, engine: Engine, config: Optional[Configuration] = None) -> None:
        """Wraps an already created engine; use Session.open to also ingest a formula.

        Args:
            engine: a fresh engine, owned by the session from now on
            config: the session options (defaults are used if None)
        """
        self.engine: Optional[Engine] = engine
        self.config = config if config is not None else Configuration()
        self.verdict: Optional[Verdict] = None
        self._log_level = logging.INFO if self.config.verbosity >= 1 else logging.DEBUG

        engine.set_verbosity(self.config.verbosity)
        if self.config.variables is not None:
            engine.adjust(self.config.variables)

    @classmethod
    def open(cls, formula: Any, config: Optional[Configuration] = None) -> "Session":
        """Creates an engine, configures it and ingests the formula.

        The top-level shape of the formula is checked before the engine is
        created. If ingestion fails, the engine is reset before the error is
        propagated.

        Raises:
            SATInputException: malformed formula
            SATResourceException: the engine could not be allocated
            SATRuntimeException: the engine is unknown
        """
        check_formula(formula)
        config = config if config is not None else Configuration()

        try:
            engine = get_engine(config.engine)
        except MemoryError as e:
            raise SATResourceException(
                SATResourceException.ENGINE_ALLOCATION, config.engine
            ) from e

        try:
            session = cls(engine, config)
            nclauses = add_clauses(engine, formula)
        except BaseException:
            engine.reset()
            raise

        logger.log(
            session._log_level,
            f"Session opened: {nclauses} clauses, {session.variables} variables",
        )
        if config.verbosity >= 2:
            logger.log(session._log_level, "\n" + format_dimacs(formula, session.variables))

        return session

    @property
    def closed(self) -> bool:
        return self.engine is None

    @property
    def variables(self) -> int:
        """The number of variables of the engine (never decreases)."""
        return self._engine().variables()

    def add_clause(self, literals: Sequence[int]) -> None:
        """Adds a (validated) clause to the engine, terminator included."""
        add_clause(self._engine(), literals)

    def run(self, budget: Optional[int] = None) -> Verdict:
        """Runs the engine search.

        This is the only call of the package that may block for a long time.
        There is no way to interrupt it but the propagation budget.

        Args:
            budget: maximum number of propagations, 0 for unbounded
                (defaults to the configured propagation budget)

        Returns:
            The Verdict of the search.
        Raises:
            SATEngineException if the engine returns an unknown result code.
        """
        engine = self._engine()
        if budget is None:
            budget = self.config.propagation_budget

        self.verdict = None
        res = engine.solve(budget)
        try:
            self.verdict = Verdict(res)
        except ValueError:
            raise SATEngineException(res)

        logger.log(self._log_level, f"Engine returned {self.verdict.name}")
        return self.verdict

    def close(self) -> None:
        """Resets the engine. Closing a closed session does nothing."""
        if self.engine is not None:
            engine, self.engine = self.engine, None
            self.verdict = None
            engine.reset()
            logger.log(self._log_level, "Session closed")

    def _engine(self) -> Engine:
        if self.engine is None:
            raise SATRuntimeException(SATRuntimeException.SESSION_CLOSED)
        return self.engine

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
