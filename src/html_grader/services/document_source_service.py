# src/html_grader/services/document_source_service.py
from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from bs4 import BeautifulSoup

from html_grader.core.managers.config_manager import config_manager
from html_grader.exceptions import DocumentSourceError
from html_grader.model import CheckMode, GraderConfig
from html_grader.services.http_request_service import HttpRequestService

logger = logging.getLogger(__name__)


def parse_document(raw: bytes) -> BeautifulSoup:
    """Parses raw markup; bs4 sniffs the encoding when given bytes."""
    return BeautifulSoup(raw, "html.parser")


async def read_file(path: str) -> bytes:
    """Reads the HTML file in a worker thread."""
    logger.info("Checking file %s", path)
    try:
        return await asyncio.to_thread(Path(path).read_bytes)
    except OSError as e:
        raise DocumentSourceError(f"Could not read {path}: {e.strerror or e}") from e


async def fetch_url(url: str) -> bytes:
    logger.info("Checking url %s", url)
    async with HttpRequestService(config_manager.get_all()) as http:
        return await http.fetch(url)


async def load_document(config: GraderConfig) -> BeautifulSoup:
    """
    Obtains the raw document for the configured mode and parses it.

    Raises:
        DocumentSourceError: if the file cannot be read or the URL cannot be fetched.
    """
    logger.info("Checking using type: %s", config.mode.value)
    if config.mode is CheckMode.FILE:
        raw = await read_file(config.target)
    else:
        raw = await fetch_url(config.target)
    return parse_document(raw)
