from enum import Enum
from typing import Optional

from satiter.log import get_sublogger
from satiter.scratch import Allocator, ScratchBuffer
from satiter.session import Session, Verdict
from satiter.solution import block_solution, get_solution

logger = get_sublogger("iterator")


class IteratorState(Enum):
    CREATED = "created"
    RUNNING = "running"
    YIELDED = "yielded"
    EXHAUSTED = "exhausted"
    FAILED = "failed"
    CLOSED = "closed"


TERMINAL_STATES = frozenset(
    [IteratorState.EXHAUSTED, IteratorState.FAILED, IteratorState.CLOSED]
)


class SolutionIterator:
    """This class enumerates the distinct models of the formula loaded in a session.

    Each model is excluded with a blocking clause as soon as it is found, so
    that the next search either finds a different model or proves that none
    is left. The iterator is not restartable.

    The session and the scratch buffer are released exactly once: when the
    enumeration ends (exhausted or failed), on close(), when leaving a `with`
    block, or when the iterator is garbage collected.

    Attributes:
        session: the owned session
        scratch: the buffer reused by every blocking-clause computation
        state: the current IteratorState
        count: the number of models yielded so far
    """

    def __init__(self, session: Session, allocator: Optional[Allocator] = None) -> None:
        self.session = session
        if allocator is None:
            allocator = session.config.allocator
        self.scratch = ScratchBuffer(allocator)
        self.state = IteratorState.CREATED
        self.count = 0
        self._error: Optional[BaseException] = None

    def __iter__(self) -> "SolutionIterator":
        return self

    def __next__(self) -> list[int]:
        if self.state is IteratorState.FAILED:
            raise self._error
        if self.state in TERMINAL_STATES:
            raise StopIteration

        self.state = IteratorState.RUNNING
        try:
            verdict = self.session.run()
            if verdict is Verdict.SATISFIABLE:
                solution = get_solution(self.session)
                # the same model would be found forever without this clause
                block_solution(self.session, self.scratch)
        except Exception as e:
            self._error = e
            self.state = IteratorState.FAILED
            self._release()
            raise

        if verdict is not Verdict.SATISFIABLE:
            logger.debug(f"Enumeration ended ({verdict.name}) after {self.count} models")
            self.state = IteratorState.EXHAUSTED
            self._release()
            raise StopIteration

        self.count += 1
        self.state = IteratorState.YIELDED
        return solution

    def close(self) -> None:
        """Stops the enumeration, releasing the session and the scratch buffer."""
        if self.state not in TERMINAL_STATES:
            self.state = IteratorState.CLOSED
        self._release()

    def _release(self) -> None:
        self.scratch.release()
        self.session.close()

    def __enter__(self) -> "SolutionIterator":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __del__(self) -> None:
        # __init__ may have failed before the attributes were set
        if hasattr(self, "state"):
            self.close()
