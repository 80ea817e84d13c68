"""
Configuration for integration tests.

Every test starts with an empty rate limiter so request counts do not leak
between tests.
"""

import pytest

from dhtml import server


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Clear recorded requests before and after each test."""
    server.rate_limiter.reset()
    yield
    server.rate_limiter.reset()
