"""Basic package tests."""

import embedart


def test_version() -> None:
    """Test that version is defined."""
    assert embedart.__version__ == "0.1.0"


def test_import() -> None:
    """Test that package can be imported."""
    assert embedart is not None
