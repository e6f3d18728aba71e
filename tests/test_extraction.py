from judgment_search.scraper.extraction import (
    SearchStatus,
    extract,
    is_translation_link,
    resolve_document_url,
)

from conftest import JUDGMENT_URL, TWO_ROW_MARKUP


def _row(anchor_html, info="Uploaded on : 01-JAN-24 From : High Court Division", parties="A vs B"):
    return f"<tr><td>1</td><td>{anchor_html} {info}</td><td>{parties}</td><td>desc</td></tr>"


def _page(*rows):
    return "<html><body><table>" + "".join(rows) + "</table></body></html>"


def test_two_row_fixture_yields_single_record(site):
    result = extract(TWO_ROW_MARKUP, site=site)
    assert result.status is SearchStatus.OK
    assert result.candidate_count == 2
    assert len(result) == 1
    rec = result.records[0]
    assert rec.title == "Civil Appeal No. 12 of 2019"
    assert rec.parties == "Md. Rahim vs The State"
    assert rec.uploaded_on == "08-SEP-25"
    assert rec.from_court == "High Court Division"
    assert rec.document_url == JUDGMENT_URL


def test_no_pdf_anchors_is_no_results(site):
    markup = _page(_row('<a href="view.php?id=4">judgment.pdf</a>'))
    result = extract(markup, site=site)
    assert list(result) == []
    assert result.status is SearchStatus.NO_RESULTS
    assert result.message == "No judgments found matching your criteria."


def test_empty_markup_is_no_results(site):
    assert extract("", site=site).status is SearchStatus.NO_RESULTS
    assert extract(None, site=site).status is SearchStatus.NO_RESULTS


def test_short_row_is_no_valid_records(site):
    markup = '<table><tr><td><a href="a.pdf">Writ Petition 1</a></td><td>x</td></tr></table>'
    result = extract(markup, site=site)
    assert list(result) == []
    assert result.candidate_count == 1
    assert result.status is SearchStatus.NO_VALID_RECORDS


def test_anchor_outside_table_is_discarded(site):
    result = extract('<p><a href="a.pdf">Writ Petition 1</a></p>', site=site)
    assert result.status is SearchStatus.NO_VALID_RECORDS


def test_translation_links_excluded_in_both_languages(site):
    markup = _page(
        _row('<a href="a.pdf">অনুবাদ (Google)</a>'),
        _row('<a href="b.pdf">TRANSLATION (GOOGLE)</a>'),
        _row('<a href="c.pdf">translation (google)</a>'),
    )
    result = extract(markup, site=site)
    assert result.candidate_count == 3
    assert result.status is SearchStatus.NO_VALID_RECORDS


def test_empty_title_is_discarded(site):
    result = extract(_page(_row('<a href="a.pdf">   </a>')), site=site)
    assert result.status is SearchStatus.NO_VALID_RECORDS


def test_href_match_is_case_insensitive_and_uses_raw_attribute(site):
    markup = _page(_row('<a href="Docs/Appeal.PDF?v=2">Criminal Appeal 9</a>'))
    result = extract(markup, site=site)
    assert [r.document_url for r in result] == ["https://www.supremecourt.gov.bd/web/Docs/Appeal.PDF?v=2"]


def test_rows_keep_source_order_and_are_not_deduplicated(site):
    markup = _page(
        _row('<a href="x.pdf">Same Title</a>'),
        _row('<a href="y.pdf">Other</a>'),
        _row('<a href="x.pdf">Same Title</a>'),
    )
    titles = [r.title for r in extract(markup, site=site)]
    assert titles == ["Same Title", "Other", "Same Title"]


def test_th_cells_count_towards_row_width(site):
    markup = "<table><tr><th>1</th><th><a href='a.pdf'>Appeal</a></th><th>P vs Q</th></tr></table>"
    result = extract(markup, site=site)
    assert len(result) == 1
    assert result.records[0].parties == "P vs Q"
    assert result.records[0].uploaded_on == ""


def test_resolve_document_url(site):
    assert resolve_document_url("../resources/a.pdf", site) == "https://www.supremecourt.gov.bd/resources/a.pdf"
    assert resolve_document_url("resources/a.pdf", site) == "https://www.supremecourt.gov.bd/web/resources/a.pdf"
    assert resolve_document_url("https://cdn.example.org/a.pdf", site) == "https://cdn.example.org/a.pdf"
    assert resolve_document_url("HTTP://cdn.example.org/a.pdf", site) == "HTTP://cdn.example.org/a.pdf"


def test_is_translation_link():
    assert is_translation_link("অনুবাদ")
    assert is_translation_link("Translation (Google)")
    assert not is_translation_link("Civil Appeal No. 12")
    assert not is_translation_link(None)


def test_title_mentioning_translation_is_kept(site):
    markup = _page(_row('<a href="a.pdf">Bangladesh Translation Bureau vs State</a>'))
    result = extract(markup, site=site)
    assert result.status is SearchStatus.OK
    assert [r.title for r in result] == ["Bangladesh Translation Bureau vs State"]
    assert not is_translation_link("Translation Bureau")
    assert is_translation_link("Google translation")


def test_line_breaks_in_cells_become_spaces(site):
    markup = _page(_row(
        '<a href="a.pdf">Writ Petition 7</a>',
        info="<br/>Uploaded on : 02-FEB-24<br/>From : Appellate Division",
        parties="Md. Rahim<br/>-Vs-<br/>The State",
    ))
    rec = extract(markup, site=site).records[0]
    assert rec.parties == "Md. Rahim -Vs- The State"
    assert rec.uploaded_on == "02-FEB-24"
    assert rec.from_court == "Appellate Division"


def test_other_schemes_are_absolute_and_rejected(site):
    assert resolve_document_url("ftp://files.example.org/a.pdf", site) == "ftp://files.example.org/a.pdf"
    result = extract(_page(_row('<a href="ftp://files.example.org/a.pdf">Appeal 3</a>')), site=site)
    assert result.candidate_count == 1
    assert result.status is SearchStatus.NO_VALID_RECORDS
