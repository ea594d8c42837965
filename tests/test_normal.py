"""
Tests for the normal distribution approximation.
"""

import pytest
import numpy as np
from scipy.stats import norm

from options_sheet.pricing.normal import normal_cdf, normal_pdf


class TestNormalCDF:
    """Test the Zelen & Severo approximation."""

    def test_cdf_at_zero(self):
        """Φ(0) is one half."""
        assert np.isclose(normal_cdf(0.0), 0.5, atol=1e-8)

    def test_symmetry(self):
        """Φ(-x) = 1 - Φ(x)."""
        for x in np.linspace(-6, 6, 121):
            assert np.isclose(normal_cdf(-x), 1 - normal_cdf(x), atol=1e-8)

    def test_matches_exact_cdf(self):
        """Absolute error stays below the 7.5e-8 bound across the real line."""
        x = np.linspace(-8, 8, 32001)
        error = np.abs(normal_cdf(x) - norm.cdf(x))
        assert error.max() < 7.5e-8

    def test_range(self):
        """Values lie in [0, 1] and increase with x."""
        values = normal_cdf(np.linspace(-10, 10, 401))
        assert np.all(values >= 0)
        assert np.all(values <= 1)
        assert np.all(np.diff(values) >= 0)

    def test_tails(self):
        """Extreme arguments saturate without overflow."""
        assert normal_cdf(40.0) == 1.0
        assert normal_cdf(-40.0) == 0.0
        assert normal_cdf(np.inf) == 1.0
        assert normal_cdf(-np.inf) == 0.0

    def test_scalar_in_float_out(self):
        """Scalars return plain floats, arrays return arrays."""
        assert isinstance(normal_cdf(1.0), float)
        assert isinstance(normal_cdf(1), float)

        values = normal_cdf(np.array([-1.0, 0.0, 1.0]))
        assert isinstance(values, np.ndarray)
        assert values.shape == (3,)


class TestNormalPDF:
    """Test the standard normal density."""

    def test_matches_scipy(self):
        """Density agrees with scipy."""
        x = np.linspace(-5, 5, 101)
        assert np.allclose(normal_pdf(x), norm.pdf(x))

    def test_peak(self):
        """φ(0) = 1/√(2π)."""
        assert np.isclose(normal_pdf(0.0), 1 / np.sqrt(2 * np.pi))
        assert isinstance(normal_pdf(0.0), float)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
