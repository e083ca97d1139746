import pytest

from fakes import BruteForceEngine, RecordingAllocator, ScriptedEngine, SATISFIABLE

from satiter.satexception import SATResourceException, SATRuntimeException
from satiter.scratch import ScratchBuffer
from satiter.session import Session
from satiter.solution import block_solution, get_solution


class FixedModelEngine(ScriptedEngine):
    """Always satisfiable, with the given model."""

    def __init__(self, model):
        super().__init__([])
        self.fixed = model
        self.adjust(len(model))

    def solve(self, budget=0):
        self.model = tuple(self.fixed)
        return SATISFIABLE


def test_get_solution_order_and_signs():
    session = Session(FixedModelEngine([1, -1, -1, 1]))
    session.run()
    assert get_solution(session) == [1, -2, -3, 4]


def test_get_solution_is_plain_ints():
    session = Session(FixedModelEngine([1, -1]))
    session.run()
    assert all(type(lit) is int for lit in get_solution(session))


def test_get_solution_length_follows_variables():
    engine = BruteForceEngine()
    session = Session(engine)
    session.add_clause([2])
    engine.adjust(4)
    session.run()

    solution = get_solution(session)
    assert len(solution) == 4
    assert solution[1] == 2


def test_get_solution_without_model():
    session = Session(ScriptedEngine([]))
    with pytest.raises(SATRuntimeException) as ex:
        get_solution(session)
    assert ex.value.code == SATRuntimeException.NO_MODEL

    session.run()  # UNSATISFIABLE
    with pytest.raises(SATRuntimeException):
        get_solution(session)


def test_block_solution_clause():
    engine = FixedModelEngine([1, -1, 1])
    session = Session(engine)
    session.run()

    scratch = ScratchBuffer()
    block_solution(session, scratch)

    assert engine.clauses[-1] == [-1, 2, -3]
    assert engine.added[-1] == 0
    assert scratch.buffer[1:4].tolist() == [1, -1, 1]


def test_blocked_model_is_never_found_again():
    engine = BruteForceEngine()
    session = Session(engine)
    session.add_clause([1, 2, 3])
    scratch = ScratchBuffer()

    session.run()
    first = get_solution(session)
    block_solution(session, scratch)

    session.run()
    assert get_solution(session) != first


def test_block_solution_without_variables():
    engine = BruteForceEngine()
    session = Session(engine)
    session.run()
    assert get_solution(session) == []

    block_solution(session, ScratchBuffer())
    assert engine.clauses == [[]]
    assert session.run().name == "UNSATISFIABLE"


def test_block_solution_reuses_scratch():
    allocator = RecordingAllocator()
    scratch = ScratchBuffer(allocator)
    session = Session(FixedModelEngine([1, 1]))

    for _ in range(3):
        session.run()
        block_solution(session, scratch)
    assert allocator.allocations == 1
    assert allocator.reallocations == 0


@pytest.mark.parametrize("fail", ["raise", "null"])
def test_block_solution_allocation_failure(fail):
    engine = FixedModelEngine([1, 1])
    session = Session(engine)
    session.run()

    with pytest.raises(SATResourceException):
        block_solution(session, ScratchBuffer(RecordingAllocator(fail=fail)))
    assert engine.clauses == []
