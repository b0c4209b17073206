# src/html_grader/services/http_request_service.py
import asyncio
import logging
from typing import Dict, Optional

import aiohttp

from html_grader.exceptions import DocumentSourceError

logger = logging.getLogger(__name__)


class HttpRequestService:
    """
    Fetches page bodies over HTTP.
    Manages the aiohttp session; the status code never decides whether a body is used.
    """

    def __init__(self, config: Dict):
        session_config = config.get('session', {})
        self.timeout = float(session_config.get('time_out', 30))
        self.user_agent = session_config.get('user_agent', 'html-grader/1.0')
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def initialize(self):
        if not self.session or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={'User-Agent': self.user_agent},
            )
            logger.debug("HttpRequestService: Session initialized.")

    async def close(self):
        if self.session and not self.session.closed:
            await self.session.close()
            logger.debug("HttpRequestService: Session closed.")

    async def fetch(self, url: str) -> bytes:
        """
        Performs a GET request and returns the raw body.

        Raises:
            DocumentSourceError: on connection errors or timeouts.
        """
        if not self.session or self.session.closed:
            await self.initialize()

        try:
            async with self.session.get(url) as response:
                body = await response.read()
                logger.debug("GET %s -> %s (%d bytes)", url, response.status, len(body))
                if response.status >= 400:
                    logger.warning("GET %s returned status %s; grading the body anyway.", url, response.status)
                return body
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise DocumentSourceError(f"Could not fetch {url}: {str(e) or type(e).__name__}") from e
