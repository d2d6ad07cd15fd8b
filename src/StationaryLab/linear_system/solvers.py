from dataclasses import dataclass, field
from enum import Enum

import numpy as np
from numpy.typing import NDArray

from StationaryLab.linear_system.splittings import Method
from StationaryLab.linear_system.utils import LinearSystem, SIZE

MAX_ITERATIONS = 1200
THRESHOLD = 1e-6


@dataclass
class SolverSettings:
    max_iterations: int = MAX_ITERATIONS
    threshold: float = THRESHOLD
    verbose: bool = False


class Outcome(Enum):
    DIVERGED = "diverged"
    CONVERGED = "converged"
    BUDGET_EXHAUSTED = "budget exhausted"


@dataclass
class Result:
    solution: NDArray
    iterations: int
    outcome: Outcome
    relative_residual: float = float('nan')
    history: list[float] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        return self.outcome is Outcome.CONVERGED

    @property
    def diverged(self) -> bool:
        return self.outcome is Outcome.DIVERGED


def relative_residual(ls: LinearSystem, x: NDArray) -> float:
    """ ||A @ x - b|| / ||b||, accumulated in extended precision. """
    rhs = ls.rhs.astype(np.longdouble)
    rhs_norm = np.linalg.norm(rhs)
    if rhs_norm == 0:
        raise ValueError("Relative residual is undefined for b = 0")
    residual = ls.matrix.astype(np.longdouble) @ x - rhs
    return float(np.linalg.norm(residual) / rhs_norm)


def print_trace_header(method_name: str):
    print(f'==> Begin {method_name} Iterations <==')
    fields = ('Iter', 'rel. residual', 'change')
    field_width = 60 // len(fields)
    header = ''.join(field.center(field_width) for field in fields)
    print(header)


def print_trace_line(iteration: int, rho: float, previous: float):
    fmt = '.6e'
    fields = (
        f'{iteration}',
        f'{rho:{fmt}}',
        f'{rho - previous:{fmt}}',
    )
    field_width = 60 // 3
    print(''.join(field.center(field_width) for field in fields))


def solve(
    ls: LinearSystem,
    method: Method,
    settings: SolverSettings | None = None,
) -> Result:
    """
    x_0 = 0
    for k in 0...K-1:
        if ||A @ x_k - b|| / ||b|| < eps:
            return x_k
        x_{k+1} = P @ x_k + R

    `method` supplies P and R. Before any iteration the spectral radius of
    its iteration matrix is checked; a divergent splitting returns at once
    with zero iterations consumed.

    Raises `SingularSplittingError` if the method's Q cannot be inverted.
    """
    if settings is None:
        settings = SolverSettings()

    x = np.zeros(SIZE)
    splitting = method.split(ls)

    if not splitting.converges:
        return Result(solution=x, iterations=0, outcome=Outcome.DIVERGED)

    if settings.verbose:
        print_trace_header(method.name)

    history: list[float] = []
    previous = 0.0
    for iteration in range(settings.max_iterations):
        rho = relative_residual(ls, x)
        history.append(rho)
        if settings.verbose:
            print_trace_line(iteration, rho, previous)

        if rho < settings.threshold:
            return Result(
                solution=x,
                iterations=iteration,
                outcome=Outcome.CONVERGED,
                relative_residual=rho,
                history=history,
            )

        x = splitting.propagator @ x + splitting.offset
        previous = rho

    return Result(
        solution=x,
        iterations=settings.max_iterations,
        outcome=Outcome.BUDGET_EXHAUSTED,
        relative_residual=relative_residual(ls, x),
        history=history,
    )
