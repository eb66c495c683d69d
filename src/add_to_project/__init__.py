"""add-to-project - add issues and pull requests to GitHub projects."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the current version of add-to-project."""
    return __version__
