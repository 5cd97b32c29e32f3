"""Shared fixtures for zipconst tests."""

import pytest

from zipconst import codec


@pytest.fixture(autouse=True)
def restore_default_code_page():
    saved = codec.get_default_code_page()
    yield
    codec.set_default_code_page(saved)
