from satiter import itersolve, solve

# formula definition
# fmt: off
cnf = [[1, -5, 4],
       [-1, 5, 3, 4],
       [-3, -4]]
# fmt: on

print("Formula:", cnf)
print()

print("A model:", solve(cnf))
print("Unsatisfiable:", solve(cnf + [[3], [4]]))
print()

for engine in ("minisat22", "glucose4", "cadical153", "pysmt:z3"):
    models = list(itersolve(cnf, engine=engine))
    print("Models (engine: {:12})\t # models = {}".format(engine, len(models)))
