from itertools import combinations

from satiter import AsyncWrapper, itersolve

N = 8


def var(row, col):
    return row * N + col + 1


def at_most_one(literals):
    return [[-a, -b] for a, b in combinations(literals, 2)]


# a queen on every row, no two queens attacking each other
cnf = [[var(r, c) for c in range(N)] for r in range(N)]
for r in range(N):
    cnf += at_most_one([var(r, c) for c in range(N)])
for c in range(N):
    cnf += at_most_one([var(r, c) for r in range(N)])
for d in range(-N + 1, N):
    cnf += at_most_one([var(r, r - d) for r in range(N) if 0 <= r - d < N])
    cnf += at_most_one([var(r, d + N - 1 - r) for r in range(N) if 0 <= d + N - 1 - r < N])


def board(model):
    return "\n".join(
        " ".join("Q" if model[var(r, c) - 1] > 0 else "." for c in range(N))
        for r in range(N)
    )


with itersolve(cnf) as solutions:
    print(board(next(solutions)))
print()

# searches proceed on a worker thread while the models are counted
n_solutions = sum(1 for _ in AsyncWrapper(itersolve(cnf), max_queue_size=8))
print("{}-queens: {} solutions".format(N, n_solutions))
