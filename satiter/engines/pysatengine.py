from typing import Optional

import numpy as np
from pysat.solvers import Solver

from satiter.engines.engine import SATISFIABLE, UNKNOWN, UNSATISFIABLE
from satiter.satexception import SATRuntimeException


class PySATEngine:
    """This class implements an Engine on top of the PySAT solvers.

    Only the back-ends that expose MiniSat's budget interface (e.g. minisat22,
    glucose3, glucose4, maplesat) can enforce a propagation budget.

    Searches go through solve_limited(expect_interrupt=True), the PySAT call
    that releases the GIL, so other threads keep running while the engine
    searches. The GIL is held by the back-ends without a limited solve, and by
    the first unbounded search following a budgeted one (the plain solve() call
    is the only way to switch the budget off). With expect_interrupt=True PySAT
    does not catch SIGINT during the search.

    Attributes:
        name: the PySAT solver name
        solver: the underlying pysat.solvers.Solver instance (None once reset)
        verbosity: the verbosity level (PySAT back-ends are always silent)
    """

    DEF_SOLVER = "minisat22"

    def __init__(self, name: str = DEF_SOLVER) -> None:
        self.name = name
        self.solver: Optional[Solver] = Solver(name=name)
        self.verbosity = 0

        self._clause: list[int] = []
        self._max_var = 0
        self._inconsistent = False
        self._budgeted = False
        self._limited = True
        self._model: Optional[np.ndarray] = None

    def set_verbosity(self, level: int) -> None:
        self.verbosity = level

    def adjust(self, variables: int) -> None:
        self._max_var = max(self._max_var, variables)

    def add(self, literal: int) -> None:
        if literal != 0:
            self._clause.append(literal)
            self._max_var = max(self._max_var, abs(literal))
            return

        if self._clause:
            self.solver.add_clause(self._clause)
        else:
            # MiniSat-like back-ends disagree on how they report it
            self._inconsistent = True
        self._clause = []

    def solve(self, budget: int = 0) -> int:
        self._model = None
        if self._inconsistent:
            return UNSATISFIABLE

        if budget > 0:
            try:
                self.solver.prop_budget(budget)
            except NotImplementedError:
                raise SATRuntimeException(
                    SATRuntimeException.UNSUPPORTED_BUDGET, self.name
                )
            self._budgeted = True
            result = self.solver.solve_limited(expect_interrupt=True)
        elif self._budgeted:
            self._budgeted = False
            result = self.solver.solve()
        else:
            result = self._solve_unbounded()

        if result is None:
            return UNKNOWN
        if not result:
            return UNSATISFIABLE

        # signs indexed by variable, unassigned variables default to false
        self._model = -np.ones(self._max_var + 1, dtype=np.int8)
        for lit in self.solver.get_model() or []:
            if lit > 0 and lit <= self._max_var:
                self._model[lit] = 1
        return SATISFIABLE

    def _solve_unbounded(self) -> Optional[bool]:
        if self._limited:
            try:
                return self.solver.solve_limited(expect_interrupt=True)
            except NotImplementedError:
                self._limited = False
        return self.solver.solve()

    def deref(self, variable: int) -> int:
        if self._model is None or variable >= len(self._model):
            return -1
        return int(self._model[variable])

    def variables(self) -> int:
        return self._max_var

    def reset(self) -> None:
        if self.solver is not None:
            self.solver.delete()
            self.solver = None
        self._model = None
