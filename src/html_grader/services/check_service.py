# src/html_grader/services/check_service.py
from __future__ import annotations

import json
import logging
from typing import Dict, List

import soupsieve
from bs4 import BeautifulSoup

from html_grader.exceptions import ChecksFileError, SelectorError

logger = logging.getLogger(__name__)


def load_checks(path: str) -> List[str]:
    """
    Loads the selectors from a JSON array and returns them sorted.

    Raises:
        ChecksFileError: if the file is unreadable or not a JSON array of strings.
    """
    logger.info("Checking using file %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            checks = json.load(f)
    except OSError as e:
        raise ChecksFileError(f"Could not read {path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise ChecksFileError(f"{path} is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise ChecksFileError(f"{path} is not UTF-8 encoded: {e.reason} at byte {e.start}") from e

    if not isinstance(checks, list) or not all(isinstance(c, str) for c in checks):
        raise ChecksFileError(f"{path} must contain a JSON array of selector strings.")

    return sorted(checks)


def evaluate(document: BeautifulSoup, selectors: List[str]) -> Dict[str, bool]:
    """
    Records for every selector whether at least one element matches.

    Selectors are visited in the given order; a repeated selector simply
    overwrites its earlier entry.

    Raises:
        SelectorError: on the first selector soupsieve cannot compile.
    """
    results: Dict[str, bool] = {}
    for selector in selectors:
        try:
            matches = document.select(selector, limit=1)
        except soupsieve.SelectorSyntaxError as e:
            raise SelectorError(selector, str(e)) from e
        results[selector] = len(matches) > 0
    logger.debug("Evaluated %d selectors, %d distinct.", len(selectors), len(results))
    return results
