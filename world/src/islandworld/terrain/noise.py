"""Noise generation for terrain height signals.

Provides seeded 1D gradient (Perlin) noise with optional fBm octaves,
plus the interpolation helpers shared by the height profile code.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Lattice period; inputs wrap every TABLE_SIZE units
TABLE_SIZE = 256


def fade(t: NDArray[np.float64]) -> NDArray[np.float64]:
    """Quintic fade curve 6t^5 - 15t^4 + 10t^3.

    Args:
        t: Fractional lattice offsets in [0, 1].

    Returns:
        Eased offsets with zero first and second derivatives at 0 and 1.
    """
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def lerp(t: ArrayLike, a: ArrayLike, b: ArrayLike) -> NDArray[np.float64]:
    """Linear interpolation from a (t=0) to b (t=1)."""
    t = np.asarray(t, dtype=np.float64)
    return a + t * (np.asarray(b, dtype=np.float64) - a)


class NoiseField:
    """Deterministic, seedable smooth 1D noise with values in [-1, 1].

    The permutation and gradient tables are drawn once from
    ``np.random.default_rng(seed)``, so two fields built with the same
    seed return identical values for identical inputs.
    """

    def __init__(
        self,
        seed: int,
        octaves: int = 1,
        lacunarity: float = 2.0,
        gain: float = 0.5,
    ) -> None:
        """Initialize NoiseField.

        Args:
            seed: Random seed for the lattice tables.
            octaves: Number of noise layers to sum (1 = plain gradient noise).
            lacunarity: Frequency multiplier between octaves.
            gain: Amplitude multiplier between octaves.
        """
        if octaves < 1:
            raise ValueError(f"octaves must be >= 1, got {octaves}")
        self.seed = seed
        self.octaves = octaves
        self.lacunarity = lacunarity
        self.gain = gain

        rng = np.random.default_rng(seed)
        permutation = rng.permutation(TABLE_SIZE)
        # Doubled so that lookups at X + 1 never need a modulo
        self._perm = np.concatenate([permutation, permutation]).astype(np.int64)
        self._gradients = rng.uniform(-1.0, 1.0, TABLE_SIZE)

    def _gradient_noise(self, x: NDArray[np.float64]) -> NDArray[np.float64]:
        """Single octave of 1D gradient noise, in [-1, 1]."""
        floor = np.floor(x)
        lattice = floor.astype(np.int64) & (TABLE_SIZE - 1)
        xf = x - floor

        g0 = self._gradients[self._perm[lattice]]
        g1 = self._gradients[self._perm[lattice + 1]]

        n0 = g0 * xf
        n1 = g1 * (xf - 1.0)

        # Raw 1D gradient noise peaks at 0.5 for unit gradients
        return lerp(fade(xf), n0, n1) * 2.0

    def noise(self, x: ArrayLike) -> NDArray[np.float64] | float:
        """Evaluate the field.

        Args:
            x: Scalar or array of sample coordinates.

        Returns:
            Noise values in [-1, 1]; a float for scalar input.
        """
        coords = np.asarray(x, dtype=np.float64)

        result = np.zeros_like(coords)
        frequency = 1.0
        amplitude = 1.0
        max_amplitude = 0.0

        for i in range(self.octaves):
            # Offset each octave so layers don't share lattice points
            result += amplitude * self._gradient_noise(coords * frequency + i * 17.31)
            max_amplitude += amplitude
            frequency *= self.lacunarity
            amplitude *= self.gain

        result = np.clip(result / max_amplitude, -1.0, 1.0)

        if result.ndim == 0:
            return float(result)
        return result

    __call__ = noise
