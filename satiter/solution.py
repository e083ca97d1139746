import numpy as np

from satiter.satexception import SATRuntimeException
from satiter.scratch import ScratchBuffer
from satiter.session import Session, Verdict


def _check_model(session: Session) -> None:
    if session.verdict is not Verdict.SATISFIABLE:
        raise SATRuntimeException(SATRuntimeException.NO_MODEL, session.verdict)


def get_solution(session: Session) -> list[int]:
    """Reads the model found by the last run of the session.

    Returns:
        A list of N integers (N = number of variables) whose i-th element is
        i+1 if variable i+1 is true and -(i+1) otherwise.
    Raises:
        SATRuntimeException (NO_MODEL) if the last run was not SATISFIABLE.
    """
    _check_model(session)
    n = session.variables
    signs = np.fromiter(
        (session.engine.deref(i) for i in range(1, n + 1)), dtype=np.int64, count=n
    )
    return (np.arange(1, n + 1, dtype=np.int64) * signs).tolist()


def block_solution(session: Session, scratch: ScratchBuffer) -> None:
    """Adds to the session the clause that excludes the current model, and only it.

    The polarities are recorded in the scratch buffer first (scratch[i] for
    variable i), then the clause made of the literals that are false under
    them is added. With no variables the clause is empty, hence the next run
    is unsatisfiable.

    Raises:
        SATRuntimeException (NO_MODEL) if the last run was not SATISFIABLE.
        SATResourceException (SCRATCH_ALLOCATION) if the scratch buffer cannot be allocated.
    """
    _check_model(session)
    n = session.variables
    mem = scratch.reserve(n + 1)

    for i in range(1, n + 1):
        mem[i] = 1 if session.engine.deref(i) > 0 else -1

    variables = np.arange(1, n + 1, dtype=np.int64)
    session.add_clause(np.where(mem[1 : n + 1] < 0, variables, -variables))
