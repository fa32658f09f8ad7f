"""Verify package imports work correctly."""


def test_import_typedrill() -> None:
    """Test that typedrill can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import typedrill

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert typedrill.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from typedrill import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    import typedrill

    for name in typedrill.__all__:
        assert hasattr(typedrill, name), name
