from numbers import Integral
from typing import TYPE_CHECKING, Optional, Union

from satiter.satexception import SATRuntimeException

if TYPE_CHECKING:  # avoid circular import
    from satiter.engines import EngineFactory
    from satiter.scratch import Allocator


class Configuration:
    """This class collects the options of a solving session.

    Attributes:
        variables: pre-size hint for the number of variables (None when unset)
        verbosity: 0 is silent, 1 logs the session events, 2 also dumps the formula
        propagation_budget: maximum number of propagations per search, 0 means unbounded
        engine: engine name or zero-argument factory (see satiter.engines.get_engine)
        allocator: allocator of the blocking-clause scratch buffer (None for numpy)
    """

    DEF_ENGINE = "minisat22"
    DEF_VERBOSITY = 0
    DEF_PROPAGATION_BUDGET = 0

    # accepted as "no hint", like None
    UNSET_VARIABLES = -1

    def __init__(
        self,
        variables: Optional[int] = None,
        verbosity: int = DEF_VERBOSITY,
        propagation_budget: int = DEF_PROPAGATION_BUDGET,
        engine: Union[str, "EngineFactory"] = DEF_ENGINE,
        allocator: Optional["Allocator"] = None,
    ) -> None:
        if variables == self.UNSET_VARIABLES:
            variables = None

        if variables is not None:
            Configuration._check_count("variables", variables)
        Configuration._check_count("verbosity", verbosity)
        Configuration._check_count("propagation_budget", propagation_budget)
        if not (isinstance(engine, str) or callable(engine)):
            raise SATRuntimeException(
                SATRuntimeException.INVALID_CONFIGURATION, f"engine={engine!r}"
            )

        self.variables = None if variables is None else int(variables)
        self.verbosity = int(verbosity)
        self.propagation_budget = int(propagation_budget)
        self.engine = engine
        self.allocator = allocator

    @staticmethod
    def _check_count(name: str, value: object) -> None:
        if isinstance(value, bool) or not isinstance(value, Integral) or value < 0:
            raise SATRuntimeException(
                SATRuntimeException.INVALID_CONFIGURATION, f"{name}={value!r}"
            )

    def __str__(self) -> str:
        return (
            "Configuration {{"
            "variables: {variables}, "
            "verbosity: {verbosity}, "
            "propagation_budget: {budget}, "
            "engine: {engine}"
            "}}".format(
                variables=self.variables,
                verbosity=self.verbosity,
                budget=self.propagation_budget,
                engine=self.engine,
            )
        )
