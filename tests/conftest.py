# tests/conftest.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Tabula tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common fixtures for formulas and runner output
"""

import io
import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import formula
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def output_stream():
    """Provide an in-memory text stream to capture rendered tables.

    Returns:
        io.StringIO: Empty stream
    """
    return io.StringIO()


@pytest.fixture
def implication_lines():
    """Provide a small formula file worth of lines, including noise.

    Returns:
        List[str]: Raw input lines
    """
    return [
        "# implication and its contrapositive",
        "A imply B",
        "",
        "not B implies not A",
    ]
