"""This module reads and writes CNF formulas in the DIMACS format.

    c a comment
    p cnf <variables> <clauses>
    1 -2 0
    2 3 0

"""

from typing import Iterable, Optional, Sequence, TextIO

from satiter.satexception import SATParsingFileException


def read_dimacs(stream: Iterable[str]) -> tuple[list[list[int]], int]:
    """Parses a DIMACS CNF text.

    Clauses may span several lines; a trailing clause without terminator is
    accepted. Lines starting with '%' end the formula (SATLIB convention).

    Args:
        stream: an iterable of lines (e.g. an open text file)

    Returns:
        A tuple <clauses, nvars> where nvars is the variable count of the header.
    Raises:
        SATParsingFileException if the text is not valid DIMACS.
    """
    clauses: list[list[int]] = []
    nvars, nclauses = None, None
    current: list[int] = []

    for lineno, line in enumerate(stream, start=1):
        line = line.strip()
        if len(line) == 0 or line.startswith("c"):
            continue
        if line.startswith("%"):
            break

        if line.startswith("p"):
            if nvars is not None:
                raise SATParsingFileException(
                    SATParsingFileException.DOUBLE_HEADER, f"line {lineno}"
                )
            tokens = line.split()
            if len(tokens) != 4 or tokens[1] != "cnf":
                raise SATParsingFileException(
                    SATParsingFileException.SYNTAX_ERROR, f"line {lineno}: {line}"
                )
            try:
                nvars, nclauses = int(tokens[2]), int(tokens[3])
            except ValueError:
                raise SATParsingFileException(
                    SATParsingFileException.SYNTAX_ERROR, f"line {lineno}: {line}"
                )
            continue

        if nvars is None:
            raise SATParsingFileException(
                SATParsingFileException.MISSING_HEADER, f"line {lineno}"
            )

        for token in line.split():
            try:
                lit = int(token)
            except ValueError:
                raise SATParsingFileException(
                    SATParsingFileException.SYNTAX_ERROR, f"line {lineno}: {token}"
                )
            if lit == 0:
                clauses.append(current)
                current = []
            elif abs(lit) > nvars:
                raise SATParsingFileException(
                    SATParsingFileException.HEADER_MISMATCH,
                    f"line {lineno}: variable {abs(lit)} > {nvars}",
                )
            else:
                current.append(lit)

    if current:
        clauses.append(current)

    if nvars is None:
        raise SATParsingFileException(SATParsingFileException.MISSING_HEADER)
    if len(clauses) != nclauses:
        raise SATParsingFileException(
            SATParsingFileException.HEADER_MISMATCH,
            f"{len(clauses)} clauses, {nclauses} declared",
        )

    return clauses, nvars


def format_dimacs(
    clauses: Sequence[Sequence[int]], nvars: Optional[int] = None
) -> str:
    """Serializes a formula in DIMACS format.

    Args:
        clauses: the formula
        nvars: the variable count of the header (defaults to the largest variable)
    """
    largest = max((abs(lit) for clause in clauses for lit in clause), default=0)
    if nvars is None or nvars < largest:
        nvars = largest

    lines = [f"p cnf {nvars} {len(clauses)}"]
    for clause in clauses:
        lines.append(" ".join([str(int(lit)) for lit in clause] + ["0"]))
    return "\n".join(lines) + "\n"


def write_dimacs(
    clauses: Sequence[Sequence[int]], stream: TextIO, nvars: Optional[int] = None
) -> None:
    stream.write(format_dimacs(clauses, nvars))


def format_solution(solution: Sequence[int]) -> str:
    """Formats a model as a DIMACS 'v' line."""
    return " ".join(["v"] + [str(lit) for lit in solution] + ["0"])
