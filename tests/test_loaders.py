from pathlib import Path

import pytest
from docx import Document
from pypdf import PdfWriter

from workspace_insights.analysis import analyze
from workspace_insights.ingestion import SUPPORTED_SUFFIXES, load_document


def test_load_docx_joins_paragraphs(tmp_path: Path) -> None:
    docx_path = tmp_path / "sample.docx"
    doc = Document()
    doc.add_paragraph("Hello Docx.")
    doc.add_paragraph("")
    doc.add_paragraph("Second paragraph.")
    doc.save(docx_path)

    loaded, report = load_document(docx_path)
    assert report.skip_reason is None
    assert loaded is not None
    assert loaded.text == "Hello Docx.\n\nSecond paragraph."
    assert loaded.title == "sample"
    assert analyze(loaded.text).paragraph_count == 2


def test_load_text_and_markdown(tmp_path: Path) -> None:
    txt_path = tmp_path / "notes.txt"
    txt_path.write_text("plain text body", encoding="utf-8")
    md_path = tmp_path / "readme.md"
    md_path.write_text("# Heading\n\nBody", encoding="utf-8")

    loaded_txt, _ = load_document(txt_path)
    loaded_md, report_md = load_document(md_path)
    assert loaded_txt is not None and loaded_txt.text == "plain text body"
    assert loaded_md is not None and loaded_md.source_type == "text"
    assert report_md.bytes_total == md_path.stat().st_size


def test_load_html_strips_markup(tmp_path: Path) -> None:
    html_path = tmp_path / "page.html"
    html_path.write_text(
        "<html><body><h1>Title</h1><p>Hello <b>world</b></p></body></html>",
        encoding="utf-8",
    )
    loaded, report = load_document(html_path)
    assert report.skip_reason is None
    assert loaded is not None
    assert loaded.text == "Title Hello world"


def test_blank_pdf_page_is_counted_as_empty(tmp_path: Path) -> None:
    pdf_path = tmp_path / "blank.pdf"
    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    with pdf_path.open("wb") as handle:
        writer.write(handle)

    loaded, report = load_document(pdf_path)
    assert loaded is not None
    assert loaded.text == ""
    assert report.pages_total == 1
    assert report.pages_loaded == 0
    assert report.pages_skipped_empty == 1


def test_unreadable_files_are_reported(tmp_path: Path) -> None:
    pdf_path = tmp_path / "empty.pdf"
    pdf_path.write_bytes(b"")
    docx_path = tmp_path / "broken.docx"
    docx_path.write_bytes(b"not a zip archive")

    loaded_pdf, report_pdf = load_document(pdf_path)
    loaded_docx, report_docx = load_document(docx_path)
    assert loaded_pdf is None and report_pdf.skip_reason == "pdf_parse_error"
    assert loaded_docx is None and report_docx.skip_reason == "docx_parse_error"


def test_oversized_file_is_skipped(tmp_path: Path) -> None:
    txt_path = tmp_path / "big.txt"
    txt_path.write_text("x" * 64, encoding="utf-8")
    loaded, report = load_document(txt_path, max_doc_bytes=10)
    assert loaded is None
    assert report.skip_reason == "file_too_large"
    assert report.to_dict()["bytes_total"] == 64


def test_unsupported_suffix_raises(tmp_path: Path) -> None:
    path = tmp_path / "image.png"
    path.write_bytes(b"\x89PNG")
    assert ".png" not in SUPPORTED_SUFFIXES
    with pytest.raises(ValueError):
        load_document(path)
