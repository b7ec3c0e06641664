"""Verify package imports work correctly."""


def test_import_hellman() -> None:
    """Test that hellman can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import hellman

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert hellman.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from hellman import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    import hellman

    for name in hellman.__all__:
        assert hasattr(hellman, name), name
