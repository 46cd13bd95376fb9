"""Tests for trial division."""

import numpy as np
import pytest

from primegen.core.sieve import sieve_of_eratosthenes
from primegen.core.trial_division import trial_division


class TestTrialDivision:
    """Tests for trial_division function."""

    def test_primes_up_to_20(self):
        np.testing.assert_array_equal(trial_division(20), [2, 3, 5, 7, 11, 13, 17, 19])

    def test_larger_primes(self):
        """Test some larger known primes."""
        primes = trial_division(131)
        for p in [97, 101, 103, 107, 109, 113, 127, 131]:
            assert p in primes, f"{p} should be prime"

    def test_odd_squares_excluded(self):
        primes = trial_division(130)
        for c in [9, 25, 49, 121]:
            assert c not in primes

    @pytest.mark.parametrize("limit,expected", [
        (0, []),
        (1, []),
        (2, [2]),
        (3, [2, 3]),
        (4, [2, 3]),
        (5, [2, 3, 5]),
    ])
    def test_small_limits(self, limit, expected):
        """Seeds never exceed the limit."""
        np.testing.assert_array_equal(trial_division(limit), expected)

    def test_matches_eratosthenes(self):
        np.testing.assert_array_equal(trial_division(1000), sieve_of_eratosthenes(1000))

    def test_matches_eratosthenes_every_small_limit(self):
        for limit in range(201):
            np.testing.assert_array_equal(trial_division(limit), sieve_of_eratosthenes(limit))

    def test_deterministic(self):
        np.testing.assert_array_equal(trial_division(500), trial_division(500))

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            trial_division(-3)

    def test_bool_limit_rejected(self):
        with pytest.raises(TypeError):
            trial_division(True)
