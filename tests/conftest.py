import os
import sys

import pytest

# Ensure the `src/` directory is on sys.path so we can import `judgment_search` package
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

import fitz  # noqa: E402

from judgment_search.api.config import SiteConfig  # noqa: E402
from judgment_search.errors import NetworkError  # noqa: E402
from judgment_search.relay import RelayResponse  # noqa: E402

SITE = SiteConfig(
    site_root="https://www.supremecourt.gov.bd/",
    web_base="https://www.supremecourt.gov.bd/web/",
    search_url="https://www.supremecourt.gov.bd/web/index.php",
)

JUDGMENT_URL = "https://www.supremecourt.gov.bd/resources/documents/1234_CA_12_2019.pdf"

TWO_ROW_MARKUP = """
<html><body><div id="div_body"><table class="table">
  <tr><th>SL</th><th>Case No.</th><th>Parties</th><th>Short Description</th></tr>
  <tr>
    <td>1</td>
    <td>
      <a href="../resources/documents/1234_CA_12_2019.pdf">Civil Appeal No. 12 of 2019</a>
      <br/>Uploaded on : 08-SEP-25
      <br/>From : High Court Division
    </td>
    <td>Md. Rahim   vs   The State</td>
    <td>Land dispute over inherited property</td>
  </tr>
  <tr>
    <td>2</td>
    <td>
      <a href="translations/1234_CA_12_2019_bn.pdf">Translation (Google)</a>
      <br/>Uploaded on : 08-SEP-25 From : High Court Division
    </td>
    <td>Md. Rahim vs The State</td>
    <td>Machine translation</td>
  </tr>
</table></div></body></html>
"""

HTML_ERROR_PAGE = b"<!DOCTYPE html>\n<html><head><title>404 Not Found</title></head><body>Not Found</body></html>"


def build_pdf(pages: int = 1, text: str = "IN THE SUPREME COURT OF BANGLADESH") -> bytes:
    doc = fitz.open()
    for i in range(pages):
        page = doc.new_page(width=595, height=842)
        page.insert_text((72, 72), f"{text} - page {i + 1}", fontsize=12)
    data = doc.tobytes()
    doc.close()
    return data


class FakeRelay:
    """In-memory stand-in for UpstreamRelay."""

    def __init__(self, markup="", documents=None):
        self.markup = markup
        self.documents = dict(documents or {})
        self.search_calls = []
        self.fetch_calls = []

    def search(self, params):
        self.search_calls.append(dict(params))
        if isinstance(self.markup, Exception):
            raise self.markup
        return self.markup

    def fetch_document(self, url):
        self.fetch_calls.append(url)
        doc = self.documents.get(url)
        if doc is None:
            return RelayResponse(404, b"<html><body>Not Found</body></html>", "text/html")
        if isinstance(doc, Exception):
            raise doc
        if isinstance(doc, RelayResponse):
            return doc
        return RelayResponse(200, doc, "application/pdf")


@pytest.fixture
def site():
    return SITE


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def fake_relay():
    return FakeRelay(markup=TWO_ROW_MARKUP, documents={JUDGMENT_URL: build_pdf(3)})


@pytest.fixture
def network_error():
    return NetworkError("connection refused")
