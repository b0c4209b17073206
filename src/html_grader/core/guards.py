# src/html_grader/core/guards.py
import logging
import os

from html_grader.exceptions import MissingFileError
from html_grader.model import FileCheck

logger = logging.getLogger(__name__)


def assert_file_exists(path: str) -> FileCheck:
    """
    Checks that a filesystem entry exists at `path`.

    Returns:
        FileCheck: the path unchanged plus the outcome. Never exits; the
        caller decides what a failed check means.
    """
    path = str(path)
    logger.info("Checking for file %s", path)
    return FileCheck(path=path, exists=os.path.exists(path))


def require_file(path: str) -> str:
    """Returns `path` if it exists, raises MissingFileError otherwise."""
    check = assert_file_exists(path)
    if not check.ok:
        raise MissingFileError(check)
    return check.path


def assert_url_exists(url: str) -> str:
    """URLs are accepted as-is; reachability only shows when fetching."""
    url = str(url)
    logger.info("Checking for url %s", url)
    return url
