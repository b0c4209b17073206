# src/html_grader/exceptions.py
from html_grader.model import FileCheck


class GraderError(Exception):
    """Base class for every failure the grader reports to the user."""


class MissingFileError(GraderError):
    """A required local file (checks or HTML) does not exist."""

    def __init__(self, check: FileCheck):
        super().__init__(check.message)
        self.check = check


class DocumentSourceError(GraderError):
    """The HTML document could not be read or fetched."""


class ChecksFileError(GraderError):
    """The selectors file is unreadable or is not a JSON array of strings."""


class SelectorError(GraderError):
    """A selector could not be parsed by the selector engine."""

    def __init__(self, selector: str, reason: str):
        super().__init__(f"Invalid selector '{selector}': {reason}")
        self.selector = selector
