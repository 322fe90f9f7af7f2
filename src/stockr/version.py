"""Version information for stockr."""

import os
from importlib.metadata import PackageNotFoundError, version


def get_package_version() -> str:
    """Get the installed stockr version, or 'unknown' when not installed."""
    try:
        return version("stockr")
    except PackageNotFoundError:
        return "unknown"


def get_git_commit() -> str:
    """Get the git commit hash from the GIT_COMMIT environment variable."""
    return os.getenv("GIT_COMMIT", "unknown")


def get_version_info() -> str:
    """Get formatted version information for logging.

    Returns:
        Formatted string with package version, git commit and branch.
    """
    branch = os.getenv("GIT_BRANCH", "unknown")
    return f"version={get_package_version()}, commit={get_git_commit()}, branch={branch}"
