"""
Backend parametrisation for matrix tests.

Every operation test runs against each backend; they must agree bit for bit.
"""

import pytest

BACKENDS = ('cpu', 'loop')


@pytest.fixture(params=BACKENDS)
def backend(request):
    """Backend name passed through the backend= keyword."""
    return request.param
