# tests/core/test_document_source.py
import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from html_grader.exceptions import DocumentSourceError
from html_grader.model import CheckMode, GraderConfig
from html_grader.services.check_service import evaluate
from html_grader.services.document_source_service import load_document, parse_document, read_file
from html_grader.services.http_request_service import HttpRequestService


async def _load_from_server(body: str, status: int):
    """Start een lokale server die `body` met `status` teruggeeft en laad het document."""
    async def handler(_request):
        return web.Response(text=body, status=status, content_type="text/html")

    app = web.Application()
    app.router.add_get("/", handler)
    async with TestServer(app) as server:
        config = GraderConfig(checks_path="checks.json", mode=CheckMode.URL, target=str(server.make_url("/")))
        return await load_document(config)


def test_parse_document_from_bytes():
    document = parse_document("<h1>Grüße</h1>".encode("utf-8"))
    assert document.select_one("h1").get_text() == "Grüße"


def test_parse_document_empty_input():
    assert evaluate(parse_document(b""), ["h1"]) == {"h1": False}


def test_load_document_file_mode(html_file):
    config = GraderConfig(checks_path="checks.json", mode=CheckMode.FILE, target=str(html_file))
    document = asyncio.run(load_document(config))
    assert document.select("h1")


def test_read_file_missing_raises(tmp_path):
    with pytest.raises(DocumentSourceError, match="Could not read"):
        asyncio.run(read_file(str(tmp_path / "gone.html")))


def test_read_file_directory_raises(tmp_path):
    """Een map is geen leesbaar HTML-bestand."""
    with pytest.raises(DocumentSourceError):
        asyncio.run(read_file(str(tmp_path)))


@pytest.mark.parametrize("status", [200, 404, 500])
def test_load_document_url_mode_ignores_status(status):
    """De body wordt beoordeeld, ongeacht de HTTP-statuscode."""
    document = asyncio.run(_load_from_server('<a href="x">link</a>', status))
    assert evaluate(document, ["a[href]"]) == {"a[href]": True}


def test_fetch_connection_error_raises():
    async def _fetch():
        async with HttpRequestService({"session": {"time_out": 5}}) as http:
            # Port 1 is reserved; nothing listens there.
            return await http.fetch("http://127.0.0.1:1/")

    with pytest.raises(DocumentSourceError, match="Could not fetch"):
        asyncio.run(_fetch())


def test_fetch_invalid_url_raises():
    async def _fetch():
        async with HttpRequestService({}) as http:
            return await http.fetch("not-a-url")

    with pytest.raises(DocumentSourceError):
        asyncio.run(_fetch())


def test_http_service_reads_session_settings():
    service = HttpRequestService({"session": {"time_out": "7", "user_agent": "probe/0.1"}})
    assert service.timeout == 7.0
    assert service.user_agent == "probe/0.1"
    assert service.session is None


def test_fetch_timeout_raises():
    """Een server die te traag antwoordt levert een DocumentSourceError op."""
    async def slow_handler(_request):
        await asyncio.sleep(1.0)
        return web.Response(text="<h1>late</h1>", content_type="text/html")

    async def _fetch():
        app = web.Application()
        app.router.add_get("/", slow_handler)
        async with TestServer(app) as server:
            async with HttpRequestService({"session": {"time_out": 0.1}}) as http:
                return await http.fetch(str(server.make_url("/")))

    with pytest.raises(DocumentSourceError, match="Could not fetch"):
        asyncio.run(_fetch())
