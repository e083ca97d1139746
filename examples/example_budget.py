from satiter import solve

HOLES = 9


def var(pigeon, hole):
    return pigeon * HOLES + hole + 1


# HOLES + 1 pigeons, each in its own hole
cnf = [[var(p, h) for h in range(HOLES)] for p in range(HOLES + 1)]
for h in range(HOLES):
    for p1 in range(HOLES + 1):
        for p2 in range(p1 + 1, HOLES + 1):
            cnf.append([-var(p1, h), -var(p2, h)])

for budget in (1000, 100000, 10000000):
    result = solve(cnf, propagation_budget=budget, engine="glucose4")
    print("Pigeonhole {} (budget: {:>10})\t result = {}".format(HOLES, budget, result))
