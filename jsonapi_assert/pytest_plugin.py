"""pytest plugin for jsonapi_assert.

Registered through the pytest11 entry point in pyproject.toml, so installing
the package is enough to get the fixture.
"""

from __future__ import annotations

import pytest

from .assertions import DocumentAsserter


@pytest.fixture
def jsonapi_asserter() -> DocumentAsserter:
    """
    A DocumentAsserter with the default reporter.

    Usage in tests::

        def test_show(jsonapi_asserter):
            document = client.get("/posts/1").json()
            jsonapi_asserter.assert_data(document, post)
    """
    return DocumentAsserter()
