"""Pytest configuration and fixtures."""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded random generator so sampled results are reproducible."""
    return np.random.default_rng(20240601)
