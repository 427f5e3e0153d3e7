import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def linear_series():
    """Eleven monthly values rising by a constant 10 per period."""
    return [100.0 + 10.0 * i for i in range(11)]


@pytest.fixture
def noisy_series():
    return [10.0, 22.0, 28.0, 42.0, 48.0]
