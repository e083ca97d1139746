import gc

import pytest

from fakes import all_models

from satiter import AsyncWrapper, IteratorState, itersolve

FORMULA = [[1, 2, 3], [-1, -2], [4, -5]]


@pytest.mark.parametrize("max_queue_size", [0, 1, 2, 16])
def test_async_enumeration(engine, max_queue_size):
    wrapper = AsyncWrapper(itersolve(FORMULA, engine=engine), max_queue_size)
    models = list(wrapper)

    assert sorted(models) == sorted(all_models(FORMULA, 5))
    assert wrapper.iterator.state is IteratorState.EXHAUSTED
    assert wrapper.iterator.session.closed


def test_async_unsat(engine):
    wrapper = AsyncWrapper(itersolve([[1], [-1]], engine=engine))
    assert list(wrapper) == []


@pytest.mark.parametrize("max_queue_size", [0, 1])
def test_async_early_stop(max_queue_size):
    wrapper = AsyncWrapper(itersolve([], variables=10), max_queue_size)

    solutions = iter(wrapper)
    first = next(solutions)
    second = next(solutions)
    solutions.close()

    assert first != second
    assert wrapper.iterator.state in (IteratorState.CLOSED, IteratorState.EXHAUSTED)
    assert wrapper.iterator.session.closed


def test_async_break():
    wrapper = AsyncWrapper(itersolve([], variables=12), 1)

    models = []
    for model in wrapper:
        models.append(model)
        if len(models) == 3:
            break
    gc.collect()

    assert len(models) == 3
    assert wrapper.iterator.session.closed
