"""Shared pytest fixtures and configuration for the chainlist test suite.

Guidelines
----------
* Core tests are pure — no I/O, no mocking.
* questionary is always mocked; no test needs a terminal.
"""

from __future__ import annotations

import pytest

from chainlist.core import from_array
from chainlist.core.models import Node


@pytest.fixture
def one_two_three() -> Node[int]:
    """A fresh ``1 -> 2 -> 3`` chain for each test."""
    head = from_array([1, 2, 3])
    assert head is not None
    return head
