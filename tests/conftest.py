from io import StringIO

import pytest


@pytest.fixture
def console_output() -> StringIO:
    """A buffer standing in for standard output; colors are stripped from it."""
    return StringIO()
