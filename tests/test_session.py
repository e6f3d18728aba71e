from datetime import datetime

import fitz
import pytest

from judgment_search.documents.fetch import PDF_SIGNATURE
from judgment_search.documents.session import CancelToken, download_filename, open_document
from judgment_search.errors import (
    DocumentKind,
    MalformedDocument,
    OperationCancelled,
    SessionClosed,
)
from judgment_search.relay import RelayResponse
from judgment_search.scraper.extraction import extract
from judgment_search.scraper.schemas import CaseRecord

from conftest import HTML_ERROR_PAGE, JUDGMENT_URL, TWO_ROW_MARKUP, FakeRelay

NOW = datetime(2025, 9, 8, 15, 7)


def _record(url=JUDGMENT_URL, title="Civil Appeal No. 12 of 2019"):
    return CaseRecord(title=title, document_url=url)


def test_download_filename():
    ms = int(NOW.timestamp() * 1000)
    assert download_filename("Civil Appeal No. 12 of 2019", NOW) == f"Digital_BLD_Judgment_CivilAppealNo12of201_{ms}.pdf"
    assert download_filename("অনুবাদ", NOW) == f"Digital_BLD_Judgment_{ms}.pdf"
    assert download_filename(None, NOW) == f"Digital_BLD_Judgment_{ms}.pdf"


def test_open_document_stamps_once_and_shares_bytes(fake_relay):
    session = open_document(_record(), fake_relay, now=NOW)
    assert session.buffer.data.startswith(PDF_SIGNATURE)
    assert session.buffer.data != fake_relay.documents[JUDGMENT_URL]
    printed, _, print_disp = session.print_payload()
    downloaded, filename, dl_disp = session.download_payload(now=NOW)
    assert printed is downloaded is session.buffer.data
    assert (print_disp, dl_disp) == ("inline", "attachment")
    assert filename.startswith("Digital_BLD_Judgment_CivilAppealNo12of201_")
    assert fake_relay.fetch_calls == [JUDGMENT_URL]


def test_close_releases_buffer_and_pages(fake_relay):
    session = open_document(_record(), fake_relay)
    session.render(scale=0.5)
    assert session.area.pages
    session.close()
    assert session.closed
    assert session.area.pages == []
    with pytest.raises(SessionClosed):
        session.download_payload()


def test_cancelled_open_produces_no_session(fake_relay):
    token = CancelToken()
    token.cancel()
    with pytest.raises(OperationCancelled):
        open_document(_record(), fake_relay, cancel=token)


def test_end_to_end_extract_open_render(site, make_pdf):
    relay = FakeRelay(markup=TWO_ROW_MARKUP, documents={JUDGMENT_URL: make_pdf(4)})
    records = extract(relay.search({"year": "2019"}), site=site).records
    assert len(records) == 1
    with open_document(records[0], relay) as session:
        area = session.render(scale=0.5)
        with fitz.open(stream=relay.documents[JUDGMENT_URL], filetype="pdf") as doc:
            assert len(area.pages) == doc.page_count == 4
        assert area.error is None


def test_end_to_end_html_error_page(site):
    relay = FakeRelay(markup=TWO_ROW_MARKUP,
                      documents={JUDGMENT_URL: RelayResponse(200, HTML_ERROR_PAGE, "text/html")})
    record = extract(relay.search({}), site=site).records[0]
    session = None
    with pytest.raises(MalformedDocument) as exc:
        session = open_document(record, relay)
    assert exc.value.kind is DocumentKind.HTML_ERROR_PAGE
    assert session is None


def test_render_failure_keeps_buffer_for_retry(fake_relay, monkeypatch):
    from judgment_search.documents import render as render_mod
    session = open_document(_record(), fake_relay)
    real_open = render_mod.fitz.open

    def failing_open(*args, **kwargs):
        raise RuntimeError("decoder crashed")
    monkeypatch.setattr(render_mod.fitz, "open", failing_open)
    area = session.render(scale=0.5)
    assert area.pages == [] and area.error
    monkeypatch.setattr(render_mod.fitz, "open", real_open)
    area = session.render(scale=0.5)
    assert len(area.pages) == 3 and area.error is None
    assert fake_relay.fetch_calls == [JUDGMENT_URL]
