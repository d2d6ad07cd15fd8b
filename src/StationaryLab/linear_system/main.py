from StationaryLab.linear_system.builders import build_linear_system
from StationaryLab.linear_system.solvers import (
    Outcome, SolverSettings, solve,
)
from StationaryLab.linear_system.splittings import (
    METHODS, Method, SingularSplittingError,
)

GAMMAS = (3, 2, 1)


def report(
    gamma: float,
    method: Method,
    settings: SolverSettings | None = None,
):
    print(f'method: {method.name}')
    print(f'gamma: {gamma:g}')

    ls = build_linear_system(gamma)
    try:
        result = solve(ls, method, settings)
    except SingularSplittingError as err:
        print(f'Singular splitting: {err}')
        print()
        return

    if result.outcome is Outcome.DIVERGED:
        print('Diverges')
    elif result.outcome is Outcome.CONVERGED:
        print(f'Result (done in {result.iterations} iterations):')
        print(' '.join(f'{value:g}' for value in result.solution))
    else:
        print(f'No result (done in {result.iterations} iterations)')

    print()


def main():
    for method in METHODS:
        for gamma in GAMMAS:
            report(gamma, method)


if __name__ == "__main__":
    main()
