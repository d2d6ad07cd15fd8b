import math

import numpy as np
from StationaryLab.linear_system.builders import build_linear_system
from StationaryLab.linear_system.convergence import (
    spectral_radius, spectral_radius_below_one,
)
from StationaryLab.linear_system.splittings import GaussSeidel, Jacobi
from StationaryLab.linear_system.utils import SIZE


def jacobi_radius(gamma: float) -> float:
    """ Eigenvalues of tridiag(1, 0, 1) are 2 cos(k pi / (n + 1)) """
    return 2 * math.cos(math.pi / (SIZE + 1)) / gamma


def test_complex_eigenvalues():
    rotation = np.array([
        [0.0, -1.0],
        [1.0, 0.0],
    ])
    # eigenvalues are +/- i * scale
    assert spectral_radius_below_one(0.5 * rotation)
    assert not spectral_radius_below_one(2.0 * rotation)
    assert math.isclose(spectral_radius(0.5 * rotation), 0.5)


def test_jacobi_spectral_radius():
    for gamma in (3, 2, 1):
        splitting = Jacobi().split(build_linear_system(gamma))
        radius = spectral_radius(splitting.iteration_matrix)
        assert math.isclose(radius, jacobi_radius(gamma), rel_tol=1e-9)
        assert splitting.converges == (radius < 1)


def test_gauss_seidel_spectral_radius():
    """ For a consistently ordered matrix rho(GS) = rho(Jacobi)^2 """
    for gamma in (3, 2, 1):
        splitting = GaussSeidel().split(build_linear_system(gamma))
        radius = spectral_radius(splitting.iteration_matrix)
        assert math.isclose(radius, jacobi_radius(gamma)**2, rel_tol=1e-6)
        assert splitting.converges == (radius < 1)


def test_gamma_one_diverges_for_both():
    problem = build_linear_system(1)
    assert not Jacobi().split(problem).converges
    assert not GaussSeidel().split(problem).converges


if __name__ == "__main__":
    test_complex_eigenvalues()
    test_jacobi_spectral_radius()
    test_gauss_seidel_spectral_radius()
    test_gamma_one_diverges_for_both()
