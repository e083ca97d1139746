"""The satiter.engines submodule contains the search back-ends driven by a Session.

It exposes:

- Engine: the capability protocol (add, solve, deref, variables, adjust, reset)
- PySATEngine: an engine implemented on top of the PySAT solvers (supports propagation budgets)
- PySMTEngine: an engine implemented on top of any pysmt solver supporting QF_BOOL
- get_engine: a factory resolving engine names
"""

from typing import Callable, Union

from .engine import SATISFIABLE, UNKNOWN, UNSATISFIABLE, Engine
from .pysatengine import PySATEngine
from .pysmtengine import PySMTEngine

from satiter.satexception import SATRuntimeException

EngineFactory = Callable[[], Engine]

PYSMT_PREFIX = "pysmt"


def get_engine(engine: Union[str, EngineFactory]) -> Engine:
    """Builds a fresh engine.

    Args:
        engine: either a zero-argument callable returning an Engine, or a name:
            "pysmt" or "pysmt:<solver>" for a PySMTEngine, any other string
            is taken as a PySAT solver name (e.g. "minisat22", "glucose4")

    Raises:
        SATRuntimeException (UNKNOWN_ENGINE) if the back-end is not available.
        MemoryError is propagated as is.
    """
    if callable(engine):
        return engine()

    if not isinstance(engine, str):
        raise SATRuntimeException(SATRuntimeException.UNKNOWN_ENGINE, engine)

    curr, _, rest = engine.partition(":")
    try:
        if curr == PYSMT_PREFIX:
            if len(rest) == 0:
                return PySMTEngine()
            return PySMTEngine(rest)
        return PySATEngine(engine)
    except MemoryError:
        raise
    except Exception as e:
        # pysat raises NotImplementedError, pysmt NoSolverAvailableError
        raise SATRuntimeException(SATRuntimeException.UNKNOWN_ENGINE, engine) from e
