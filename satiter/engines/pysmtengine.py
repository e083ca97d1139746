from typing import Optional, cast

from pysmt.environment import Environment, get_env
from pysmt.exceptions import SolverReturnedUnknownResultError
from pysmt.fnode import FNode
from pysmt.logics import QF_BOOL
from pysmt.typing import BOOL

from satiter.engines.engine import SATISFIABLE, UNKNOWN, UNSATISFIABLE
from satiter.satexception import SATRuntimeException


class PySMTEngine:
    """This class implements an Engine on top of any pysmt solver supporting QF_BOOL.

    Variable i is mapped to the Boolean symbol `SYMBOL_PREFIX + str(i)` of the
    pysmt environment. Propagation budgets are not available through the pysmt
    interface: a non-zero budget is rejected.

    Attributes:
        name: the pysmt solver name (e.g. "z3", "msat", "picosat")
        env: the pysmt environment
    """

    DEF_SOLVER = "z3"
    SYMBOL_PREFIX = "__satiter_"

    def __init__(self, name: str = DEF_SOLVER, env: Optional[Environment] = None) -> None:
        self.name = name

        if env is not None:
            self.env = env
        else:
            self.env = cast(Environment, get_env())

        self.mgr = self.env.formula_manager
        self.smt_solver = self.env.factory.Solver(name=name, logic=QF_BOOL)
        self.verbosity = 0

        self._symbols: dict[int, FNode] = {}
        self._clause: list[FNode] = []
        self._max_var = 0
        self._satisfiable = False
        self._closed = False

    def set_verbosity(self, level: int) -> None:
        self.verbosity = level

    def adjust(self, variables: int) -> None:
        self._max_var = max(self._max_var, variables)

    def add(self, literal: int) -> None:
        if literal == 0:
            # Or() without arguments is the constant False
            self.smt_solver.add_assertion(self.mgr.Or(self._clause))
            self._clause = []
            return

        atom = self._symbol(abs(literal))
        self._clause.append(atom if literal > 0 else self.mgr.Not(atom))
        self._max_var = max(self._max_var, abs(literal))

    def solve(self, budget: int = 0) -> int:
        if budget > 0:
            raise SATRuntimeException(
                SATRuntimeException.UNSUPPORTED_BUDGET, "pysmt:" + self.name
            )

        self._satisfiable = False
        try:
            if not self.smt_solver.solve():
                return UNSATISFIABLE
        except SolverReturnedUnknownResultError:
            return UNKNOWN

        self._satisfiable = True
        return SATISFIABLE

    def deref(self, variable: int) -> int:
        if not self._satisfiable or variable not in self._symbols:
            return -1
        value = self.smt_solver.get_value(self._symbols[variable])
        return 1 if value.is_true() else -1

    def variables(self) -> int:
        return self._max_var

    def reset(self) -> None:
        if not self._closed:
            self.smt_solver.exit()
            self._closed = True
        self._satisfiable = False

    def _symbol(self, variable: int) -> FNode:
        if variable not in self._symbols:
            self._symbols[variable] = self.mgr.Symbol(
                self.SYMBOL_PREFIX + str(variable), BOOL
            )
        return self._symbols[variable]
