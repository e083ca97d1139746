"""This module implements the exceptions used throughout the code.

"""


class SATException(Exception):
    """This class represents the general exception used in the satiter module.
        Every other exception will inherit from this one.

    Attributes:
        message (str): Human readable string describing the exception.

    """

    def __init__(self, message):
        """Default constructor.

        It assigns the message to the attributes.

        Args:
            message (str): Human readable string describing the exception.

        """
        super().__init__(message)
        self.message = message

    def __str__(self):
        return str(self.message)


class _CodedException(SATException):
    """Shared constructor of the exceptions identified by an integer code.

    Attributes:
        code (int): The code of the exception.
        value: Additional info about the value that raised the exception (default: None).

    """

    messages = {}

    def __init__(self, code, value=None):
        self.code = code
        self.value = value
        if value is not None:
            message = "{}: {}".format(self.messages[code], value)
        else:
            message = self.messages[code]
        super().__init__(message)


class SATInputException(_CodedException, TypeError):
    """This exception handles all the cases where the formula given by the caller is malformed.
        No engine search is ever attempted on a formula that raised it.

    """

    """The formula, or one of its clauses, is not a list or tuple.

    """
    NOT_A_SEQUENCE = 0

    """A clause contains an element that is not an integer (booleans are rejected too).

    """
    NOT_AN_INTEGER = 1

    """A clause contains the literal 0, which is reserved as the clause terminator.

    """
    ZERO_LITERAL = 2

    """A clause contains a literal whose variable exceeds the largest index an engine can handle.

    """
    LITERAL_OUT_OF_RANGE = 3

    messages = {
        NOT_A_SEQUENCE: "List expected",
        NOT_AN_INTEGER: "Integer expected",
        ZERO_LITERAL: "Non-zero integer expected",
        LITERAL_OUT_OF_RANGE: "Literal out of range",
    }


class SATResourceException(_CodedException, MemoryError):
    """This exception handles the allocation failures of engines and scratch buffers.
        Partially constructed state is always torn down before it is raised.

    """

    ENGINE_ALLOCATION = 0
    SCRATCH_ALLOCATION = 1

    messages = {
        ENGINE_ALLOCATION: "Out of memory while creating the engine",
        SCRATCH_ALLOCATION: "Out of memory while allocating the scratch buffer",
    }


class SATEngineException(SATException, SystemError):
    """This exception is raised when an engine reports a result code that is
        neither satisfiable, unsatisfiable nor unknown.

    Attributes:
        code (int): The raw result code returned by the engine.

    """

    def __init__(self, code):
        self.code = code
        super().__init__("Engine return value: {}".format(code))


class SATRuntimeException(_CodedException):
    """This exception handles all the cases where the code fails because of wrong parameters or settings.

    """

    """The session (or the engine it owns) was already torn down.

    """
    SESSION_CLOSED = 0

    """A model was requested but the last search did not return SATISFIABLE.

    """
    NO_MODEL = 1

    """One of the configuration options has an invalid type or value.

    """
    INVALID_CONFIGURATION = 2

    """The engine name could not be resolved to an available back-end.

    """
    UNKNOWN_ENGINE = 3

    """A propagation budget was requested from an engine that cannot enforce it.

    """
    UNSUPPORTED_BUDGET = 4

    messages = {
        SESSION_CLOSED: "Session already closed",
        NO_MODEL: "No model available",
        INVALID_CONFIGURATION: "Invalid configuration",
        UNKNOWN_ENGINE: "Unknown engine",
        UNSUPPORTED_BUDGET: "Propagation budget not supported by the engine",
    }


class SATParsingFileException(_CodedException):
    """This exception handles all the cases where the code fails parsing a DIMACS file.

    """

    """A token that is neither a comment, a header nor an integer was found.

    """
    SYNTAX_ERROR = 0

    """The 'p cnf' header was declared more than once.

    """
    DOUBLE_HEADER = 1

    """A clause was found before the 'p cnf' header.

    """
    MISSING_HEADER = 2

    """The number of clauses, or the largest variable, does not match the header.

    """
    HEADER_MISMATCH = 3

    messages = {
        SYNTAX_ERROR: "Syntax error",
        DOUBLE_HEADER: "Header already declared",
        MISSING_HEADER: "Missing 'p cnf' header",
        HEADER_MISMATCH: "Header mismatch",
    }
