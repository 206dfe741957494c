"""Pytest configuration.

The package sits at the repository root (flat layout); make sure it is
importable even when pytest runs from a different install than the one used
for `pip install -e .`.
"""
import sys
from pathlib import Path

import pytest


def pytest_configure():
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def deuteron():
    from Chiral.RelativeSpace import RelativeStateLSJT
    # n=0, L=0, S=1, J=1, T=0
    return RelativeStateLSJT(0, 0, 1, 1, 0)


@pytest.fixture
def b20():
    from Chiral.OscillatorParameter import OscillatorParameter
    return OscillatorParameter(20.0)
