"""Tests for fdate package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_fdate() -> None:
    """Import fdate package succeeds."""
    import fdate

    assert hasattr(fdate, "__version__")
    assert fdate.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import fdate.core submodule succeeds."""
    from fdate import core

    assert hasattr(core, "__all__")


def test_import_format_module() -> None:
    """Import fdate.format submodule succeeds."""
    from fdate import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_bridge_module() -> None:
    """Import fdate.bridge submodule succeeds."""
    from fdate import bridge

    assert hasattr(bridge, "__all__")
    for name in bridge.__all__:
        assert hasattr(bridge, name), name


def test_public_names() -> None:
    """Everything in fdate.__all__ is importable from fdate."""
    import fdate

    for name in fdate.__all__:
        assert hasattr(fdate, name), name


def test_overflow_error_is_fdate_error() -> None:
    """fdate.OverflowError belongs to the fdate hierarchy."""
    from fdate import FDateError, OverflowError, ParseError, ValidationError

    assert issubclass(OverflowError, FDateError)
    assert issubclass(ParseError, FDateError)
    assert issubclass(ValidationError, FDateError)
