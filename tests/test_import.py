"""Verify package imports work correctly."""


def test_import_charla() -> None:
    """Test that charla can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import charla

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert charla.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from charla import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_exported() -> None:
    """Everything in __all__ resolves."""
    import charla

    for name in charla.__all__:
        assert hasattr(charla, name), name
