from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

# dimension of every system in this lab
SIZE = 20


@dataclass
class LinearSystem:
    matrix: NDArray
    rhs: NDArray
    solution: NDArray | None = None


    def __post_init__(self):
        # integer inputs would leave the splittings without a float dtype
        self.matrix = np.asarray(self.matrix, dtype=np.float64)
        self.rhs = np.asarray(self.rhs, dtype=np.float64)
        if self.matrix.shape != (SIZE, SIZE):
            raise ValueError(
                f"Matrix must be {SIZE}x{SIZE}, got {self.matrix.shape}"
            )
        if self.rhs.shape != (SIZE,):
            raise ValueError(
                f"Right-hand side must have length {SIZE}, got {self.rhs.shape}"
            )
