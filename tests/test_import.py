"""Verify package imports work correctly."""


def test_import_memomark() -> None:
    """Test that memomark can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import memomark

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert memomark.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from memomark import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_names_resolve() -> None:
    """Every name in __all__ is importable from the package root."""
    import memomark

    missing = [name for name in memomark.__all__ if not hasattr(memomark, name)]
    assert missing == []
