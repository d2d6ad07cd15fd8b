""" Builders of the tridiagonal `gamma` system and the triangular projections
used to split it. """

import numpy as np
from numpy.typing import NDArray
from StationaryLab.linear_system.utils import LinearSystem, SIZE


def fill_diagonal(matrix: NDArray, value: float) -> NDArray:
    """ Set `value` to a_xx """
    matrix = matrix.copy()
    np.fill_diagonal(matrix, value)
    return matrix


def fill_diagonal_siblings(matrix: NDArray, value: float) -> NDArray:
    """ Set `value` to the neighbours of a_xx """
    matrix = matrix.copy()
    rows, cols = np.indices(matrix.shape)
    matrix[np.abs(rows - cols) == 1] = value
    return matrix


def fill_pyramid(vector: NDArray, value: float) -> NDArray:
    """ `value - 1` at both ends, `value - 2` everywhere in between. """
    vector = vector.copy()
    vector[:] = value - 2
    vector[0] = value - 1
    vector[-1] = value - 1
    return vector


def build_system_matrix(gamma: float) -> NDArray:
    matrix = np.zeros((SIZE, SIZE))
    matrix = fill_diagonal(matrix, gamma)
    matrix = fill_diagonal_siblings(matrix, -1)
    return matrix


def build_rhs(gamma: float) -> NDArray:
    return fill_pyramid(np.zeros(SIZE), gamma)


def build_linear_system(gamma: float) -> LinearSystem:
    # Every row of the matrix sums to its rhs entry, so x = (1, ..., 1)
    # solves the system whenever it is solvable at all.
    return LinearSystem(
        matrix=build_system_matrix(gamma),
        rhs=build_rhs(gamma),
        solution=np.ones(SIZE),
    )


def keep_diagonal(matrix: NDArray) -> NDArray:
    """ Zero everywhere except the diagonal """
    return np.diag(np.diag(matrix))


def keep_upper(matrix: NDArray) -> NDArray:
    """ Zero on and below the diagonal """
    return np.triu(matrix, k=1)


def keep_lower(matrix: NDArray) -> NDArray:
    """ Zero on and above the diagonal """
    return np.tril(matrix, k=-1)
