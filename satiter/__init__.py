"""satiter: Boolean satisfiability solving and model enumeration for CNF formulas.

It exposes:

- solve: one-shot solving, returning a model, "UNSAT" or "UNKNOWN"
- itersolve: a lazy iterator over all the distinct models of a formula
- Session: the owner of an engine loaded with a formula
- SolutionIterator: the blocking-clause model enumerator
- AsyncWrapper: an enumeration wrapper running the searches on a worker thread
- Configuration: the options of a session
"""

__version__ = "0.1.0"

from .asynchronous import AsyncWrapper
from .configuration import Configuration
from .iterator import IteratorState, SolutionIterator
from .session import Session, Verdict
from .solver import UNKNOWN, UNSAT, itersolve, solve
