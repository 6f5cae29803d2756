"""
Mathematical utilities for hyperbolic computations.

Contains the Hermitian forms on the free coordinates, mixed-radix location
decomposition and hypercube vertex bit helpers.
"""
import numpy as np
from typing import Iterator, List, Sequence, Tuple


def hermitian_quadratic_product(zetas: Sequence[complex]) -> float:
    """Sum of squared moduli, sum_i |zeta_i|^2."""
    if len(zetas) == 0:
        return 0.0
    z = np.asarray(zetas, dtype=np.complex128)
    return float(np.vdot(z, z).real)


def hermitian_inner_product(lhs: Sequence[complex], rhs: Sequence[complex]) -> complex:
    """sum_i lhs_i * conj(rhs_i)."""
    if len(lhs) == 0:
        return 0j
    # np.vdot conjugates its first argument
    return complex(np.vdot(np.asarray(rhs, dtype=np.complex128),
                           np.asarray(lhs, dtype=np.complex128)))


def location_digits(loc: int, resolutions: Sequence[int], wrap_last: bool = True) -> List[int]:
    """Split a global grid index into per-axis digits.

    Digits are produced lowest axis first by repeated ``loc % res; loc //= res``.
    With ``wrap_last=False`` the final digit keeps the whole remaining
    quotient, which is how the odometer represents positions past the end.
    """
    digits = []
    last = len(resolutions) - 1
    for i, res in enumerate(resolutions):
        if i == last and not wrap_last:
            digits.append(loc)
            break
        digits.append(loc % res)
        loc //= res
    return digits


def location_from_digits(digits: Sequence[int], resolutions: Sequence[int]) -> int:
    """Inverse of ``location_digits``."""
    loc, scale = 0, 1
    for digit, res in zip(digits, resolutions):
        loc += digit * scale
        scale *= res
    return loc


def vertex_bits(index: int, size: int) -> Tuple[int, ...]:
    """Bits of a hypercube vertex index, lowest bit first."""
    return tuple((index >> b) & 1 for b in range(size))


def set_bits(index: int) -> Iterator[int]:
    """Positions of the set bits of ``index``, low to high."""
    b = 0
    while index:
        if index & 1:
            yield b
        index >>= 1
        b += 1
