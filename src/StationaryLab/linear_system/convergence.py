""" A fixed-point iteration `x_{k+1} = W @ x_k + c` converges from any
starting point if and only if the spectral radius of `W` is below one. """

import numpy as np
from numpy.typing import NDArray


def eigenvalues(matrix: NDArray) -> NDArray:
    """ All eigenvalues; complex in general even for a real matrix. """
    return np.linalg.eigvals(matrix)


def spectral_radius(matrix: NDArray) -> float:
    return float(np.max(np.abs(eigenvalues(matrix))))


def spectral_radius_below_one(matrix: NDArray) -> bool:
    return bool(np.all(np.abs(eigenvalues(matrix)) < 1))


def iteration_matrix(q_inverse: NDArray, matrix: NDArray) -> NDArray:
    """ W = I - Q^{-1} @ A """
    return np.eye(matrix.shape[0]) - q_inverse @ matrix
