import pytest

# every engine supported out of the box
engines = [
    ("minisat22", "minisat22"),
    ("glucose3", "glucose3"),
    ("glucose4", "glucose4"),
    ("cadical153", "cadical153"),
    ("pysmt-z3", "pysmt:z3"),
]

# engines enforcing propagation budgets
budget_engines = [
    ("minisat22", "minisat22"),
    ("glucose3", "glucose3"),
    ("glucose4", "glucose4"),
]


@pytest.fixture(params=engines, ids=lambda x: x[0])
def engine(request):
    return request.param[1]


@pytest.fixture(params=budget_engines, ids=lambda x: x[0])
def budget_engine(request):
    return request.param[1]
