from typing import Protocol

# result codes shared by every engine (IPASIR convention)
SATISFIABLE = 10
UNSATISFIABLE = 20
UNKNOWN = 0


class Engine(Protocol):
    """Protocol for the search back-ends driven by a Session.

    An Engine receives clauses one literal at a time, a 0 closing the
    current clause, and answers satisfiability queries about the clauses
    received so far. It is owned by exactly one Session and never used
    concurrently.
    """

    def set_verbosity(self, level: int) -> None:
        """Sets the verbosity of the back-end (engines may ignore it)."""
        ...

    def adjust(self, variables: int) -> None:
        """Makes sure the engine knows at least `variables` variables."""
        ...

    def add(self, literal: int) -> None:
        """Adds a literal to the current clause, or closes it if `literal` is 0.

        A clause closed without literals makes the formula unsatisfiable.
        """
        ...

    def solve(self, budget: int = 0) -> int:
        """Searches for a model of the clauses added so far.

        Args:
            budget: maximum number of propagations, 0 means unbounded

        Returns:
            SATISFIABLE, UNSATISFIABLE or UNKNOWN (budget exhausted).
        """
        ...

    def deref(self, variable: int) -> int:
        """Returns 1 if `variable` is true in the last model, -1 otherwise."""
        ...

    def variables(self) -> int:
        """Returns the number of variables (the largest index) known to the engine."""
        ...

    def reset(self) -> None:
        """Releases the back-end. Calling it twice is harmless."""
        ...
