# tests/core/conftest.py
import json

import pytest
from bs4 import BeautifulSoup

SAMPLE_HTML = """<!DOCTYPE html>
<html>
  <head><title>Profile</title></head>
  <body>
    <h1>Welcome</h1>
    <a href="/about" id="profilelink">About</a>
    <a name="anchor">No href</a>
    <p class="intro">Hello</p>
    <p class="intro">World</p>
  </body>
</html>
"""


@pytest.fixture
def html_file(tmp_path):
    """Een tijdelijk HTML-bestand met één <h1> en twee links."""
    path = tmp_path / "index.html"
    path.write_text(SAMPLE_HTML, encoding="utf-8")
    return path


@pytest.fixture
def make_checks(tmp_path):
    """Factory die een checks-bestand schrijft met de gegeven selectors."""
    def _make(selectors, name="checks.json"):
        path = tmp_path / name
        path.write_text(json.dumps(selectors), encoding="utf-8")
        return path
    return _make


@pytest.fixture
def document():
    """De SAMPLE_HTML als geparst document."""
    return BeautifulSoup(SAMPLE_HTML, "html.parser")
