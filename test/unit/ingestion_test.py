import numpy as np
import pytest

from fakes import BruteForceEngine

from satiter.ingestion import MAX_VARIABLE, add_clause, add_clauses, check_formula
from satiter.satexception import SATInputException


def test_terminator_once_per_clause():
    engine = BruteForceEngine()
    n = add_clauses(engine, [[1, -2], [3], []])

    assert n == 3
    assert engine.added == [1, -2, 0, 3, 0, 0]
    assert engine.clauses == [[1, -2], [3], []]


def test_literal_order_is_preserved():
    engine = BruteForceEngine()
    add_clauses(engine, [(5, -1, 3)])
    assert engine.added == [5, -1, 3, 0]


def test_numpy_literals():
    engine = BruteForceEngine()
    add_clauses(engine, [np.array([1, -2]), [np.int32(3), np.int64(-4)]])
    assert engine.added == [1, -2, 0, 3, -4, 0]
    assert all(type(lit) is int for lit in engine.added)


@pytest.mark.parametrize(
    "formula, code",
    [
        ([[1, 0, 2]], SATInputException.ZERO_LITERAL),
        ([[1, "x"]], SATInputException.NOT_AN_INTEGER),
        ([[1, 2.0]], SATInputException.NOT_AN_INTEGER),
        ([[True]], SATInputException.NOT_AN_INTEGER),
        ([[1], 2], SATInputException.NOT_A_SEQUENCE),
        ([[1], "12"], SATInputException.NOT_A_SEQUENCE),
        ([{1, 2}], SATInputException.NOT_A_SEQUENCE),
        ([np.array([[1, 2]])], SATInputException.NOT_A_SEQUENCE),
        ([[MAX_VARIABLE + 1]], SATInputException.LITERAL_OUT_OF_RANGE),
        ([[-MAX_VARIABLE - 1]], SATInputException.LITERAL_OUT_OF_RANGE),
    ],
)
def test_invalid_clauses(formula, code):
    with pytest.raises(SATInputException) as ex:
        add_clauses(BruteForceEngine(), formula)
    assert ex.value.code == code


@pytest.mark.parametrize("formula", [None, 1, "1 2 0", {1: [1]}, iter([[1]])])
def test_invalid_formula(formula):
    with pytest.raises(SATInputException) as ex:
        check_formula(formula)
    assert ex.value.code == SATInputException.NOT_A_SEQUENCE


def test_clause_shape_checked_first():
    with pytest.raises(SATInputException) as ex:
        check_formula([[1, 0], (2,), np.array([3]), "4"])
    assert ex.value.code == SATInputException.NOT_A_SEQUENCE
    assert "(clause 3)" in str(ex.value)

    check_formula([[1, 0], (2,), np.array([3]), []])


def test_input_errors_are_type_errors():
    with pytest.raises(TypeError):
        add_clauses(BruteForceEngine(), [[0]])


def test_partial_ingestion():
    engine = BruteForceEngine()
    with pytest.raises(SATInputException) as ex:
        add_clauses(engine, [[1, 2], [3, 0, 4], [5]])

    # the first clause and the valid prefix of the second are already in the engine
    assert engine.added == [1, 2, 0, 3]
    assert "clause 1" in str(ex.value)


def test_max_variable_accepted():
    engine = BruteForceEngine()
    add_clause(engine, [MAX_VARIABLE, -MAX_VARIABLE])
    assert engine.added == [MAX_VARIABLE, -MAX_VARIABLE, 0]
