"""Installed version of labelenum."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Distribution version, or 0.0.0 when running from an uninstalled tree."""
    try:
        return version("labelenum")
    except PackageNotFoundError:
        return "0.0.0"
