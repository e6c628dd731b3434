import io
from datetime import datetime, timezone

import pytest

from consoletap.console import Console


@pytest.fixture
def stdout() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def stderr() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(stdout, stderr) -> Console:
    """
    A private console bound to in-memory streams.
    Keeps the shared process-wide console untouched between tests.
    """
    return Console(stdout=stdout, stderr=stderr)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 7, 9, 30, 15, 250000, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock(fixed_now):
    return lambda: fixed_now
