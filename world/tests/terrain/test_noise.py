"""Tests for noise generation."""

import numpy as np
import pytest

from islandworld.terrain.noise import NoiseField, fade, lerp


class TestHelpers:
    """Tests for fade and lerp."""

    def test_fade_endpoints(self) -> None:
        """fade maps 0 to 0, 1 to 1 and 0.5 to 0.5."""
        np.testing.assert_allclose(fade(np.array([0.0, 0.5, 1.0])), [0.0, 0.5, 1.0])

    def test_fade_monotonic(self) -> None:
        """fade is non-decreasing on [0, 1]."""
        values = fade(np.linspace(0.0, 1.0, 101))
        assert np.all(np.diff(values) >= 0)

    def test_lerp(self) -> None:
        """lerp interpolates from a at t=0 to b at t=1."""
        assert lerp(0.0, 10, 20) == 10
        assert lerp(1.0, 10, 20) == 20
        assert lerp(0.25, 10, 20) == pytest.approx(12.5)

    def test_lerp_broadcasts(self) -> None:
        """lerp works elementwise on arrays."""
        result = lerp(np.array([0.0, 0.5, 1.0]), np.array([0, 0, 0]), np.array([4, 4, 4]))
        np.testing.assert_allclose(result, [0.0, 2.0, 4.0])


class TestNoiseField:
    """Tests for the seeded 1D noise field."""

    def test_deterministic(self) -> None:
        """Same seed gives same values."""
        x = np.linspace(0.0, 20.0, 500)
        np.testing.assert_array_equal(NoiseField(42).noise(x), NoiseField(42).noise(x))

    def test_different_seeds_differ(self) -> None:
        """Different seeds give different values."""
        x = np.linspace(0.1, 20.1, 500)
        assert not np.array_equal(NoiseField(1).noise(x), NoiseField(2).noise(x))

    @pytest.mark.parametrize("octaves", [1, 3, 6])
    def test_range(self, octaves: int) -> None:
        """Values lie in [-1, 1]."""
        x = np.linspace(-50.0, 50.0, 5000)
        values = NoiseField(7, octaves=octaves).noise(x)
        assert values.min() >= -1.0
        assert values.max() <= 1.0

    def test_zero_at_lattice_points(self) -> None:
        """Single-octave gradient noise is zero at integer inputs."""
        values = NoiseField(3).noise(np.arange(-10, 10, dtype=np.float64))
        np.testing.assert_allclose(values, 0.0, atol=1e-12)

    def test_not_constant(self) -> None:
        """The field varies between lattice points."""
        values = NoiseField(3).noise(np.linspace(0.1, 30.1, 300))
        assert values.std() > 0.01

    def test_continuity(self) -> None:
        """Nearby inputs give nearby outputs."""
        x = np.linspace(0.0, 10.0, 10001)
        values = NoiseField(11, octaves=2).noise(x)
        assert np.max(np.abs(np.diff(values))) < 0.01

    def test_scalar_returns_float(self) -> None:
        """Scalar input gives a plain float."""
        value = NoiseField(5).noise(0.37)
        assert isinstance(value, float)

    def test_scalar_matches_array(self) -> None:
        """Scalar and array evaluation agree."""
        field = NoiseField(5)
        assert field.noise(2.75) == pytest.approx(field.noise(np.array([2.75]))[0])

    def test_callable(self) -> None:
        """Calling the field is the same as noise()."""
        field = NoiseField(9)
        assert field(1.3) == field.noise(1.3)

    def test_invalid_octaves(self) -> None:
        """Zero octaves is rejected."""
        with pytest.raises(ValueError):
            NoiseField(1, octaves=0)
