"""Document loaders that turn files into plain text for analysis."""

from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup
from docx import Document
from pypdf import PdfReader

from workspace_insights.config import MAX_DOC_BYTES, MAX_PDF_PAGES
from workspace_insights.models import LoadedDocument, LoadReport

# Pages and docx paragraphs are joined with a blank line so they count as
# separate paragraphs.
_PARAGRAPH_JOINER = "\n\n"

SOURCE_TYPES = {
    ".txt": "text",
    ".md": "text",
    ".html": "html",
    ".htm": "html",
    ".docx": "docx",
    ".pdf": "pdf",
}
SUPPORTED_SUFFIXES = frozenset(SOURCE_TYPES)


def _report(
    path: Path,
    source_type: str,
    bytes_total: int,
    *,
    pages_total: int | None = 1,
    pages_loaded: int = 1,
    pages_skipped_empty: int = 0,
    pages_skipped_limit: int = 0,
    skip_reason: str | None = None,
) -> LoadReport:
    return LoadReport(
        source_path=str(path),
        source_type=source_type,
        bytes_total=bytes_total,
        pages_total=pages_total,
        pages_loaded=pages_loaded,
        pages_skipped_empty=pages_skipped_empty,
        pages_skipped_limit=pages_skipped_limit,
        skip_reason=skip_reason,
    )


def load_document(
    path: Path,
    *,
    max_doc_bytes: int = MAX_DOC_BYTES,
    max_pdf_pages: int = MAX_PDF_PAGES,
) -> tuple[LoadedDocument | None, LoadReport]:
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported file type: {path.suffix}")

    source_type = SOURCE_TYPES[suffix]
    bytes_total = path.stat().st_size
    if bytes_total > max_doc_bytes:
        return None, _report(
            path,
            source_type,
            bytes_total,
            pages_total=None,
            pages_loaded=0,
            skip_reason="file_too_large",
        )

    if source_type == "pdf":
        text, report = _load_pdf(path, max_pages=max_pdf_pages)
        if report.skip_reason:
            return None, report
    elif source_type == "docx":
        try:
            text = _load_docx(path)
        except Exception:
            return None, _report(
                path,
                source_type,
                bytes_total,
                pages_total=None,
                pages_loaded=0,
                skip_reason="docx_parse_error",
            )
        report = _report(path, source_type, bytes_total)
    elif source_type == "html":
        text = _load_html(path)
        report = _report(path, source_type, bytes_total)
    else:
        text = _load_text(path)
        report = _report(path, source_type, bytes_total)

    return (
        LoadedDocument(
            source_path=str(path),
            source_type=source_type,
            title=path.stem,
            text=text,
        ),
        report,
    )


def _load_pdf(path: Path, *, max_pages: int = MAX_PDF_PAGES) -> tuple[str, LoadReport]:
    bytes_total = path.stat().st_size
    try:
        reader = PdfReader(str(path))
    except Exception:
        return "", _report(
            path,
            "pdf",
            bytes_total,
            pages_total=None,
            pages_loaded=0,
            skip_reason="pdf_parse_error",
        )

    total_pages = len(reader.pages)
    pages: list[str] = []
    pages_skipped_empty = 0
    pages_skipped_limit = 0
    for idx, page in enumerate(reader.pages, start=1):
        if idx > max_pages:
            pages_skipped_limit = total_pages - max_pages
            break
        text = page.extract_text() or ""
        if text.strip():
            pages.append(text.strip())
        else:
            pages_skipped_empty += 1
    report = _report(
        path,
        "pdf",
        bytes_total,
        pages_total=total_pages,
        pages_loaded=len(pages),
        pages_skipped_empty=pages_skipped_empty,
        pages_skipped_limit=pages_skipped_limit,
    )
    return _PARAGRAPH_JOINER.join(pages), report


def _load_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="ignore")


def _load_docx(path: Path) -> str:
    doc = Document(str(path))
    paragraphs = [paragraph.text for paragraph in doc.paragraphs if paragraph.text.strip()]
    return _PARAGRAPH_JOINER.join(paragraphs)


def _load_html(path: Path) -> str:
    raw = path.read_text(encoding="utf-8", errors="ignore")
    soup = BeautifulSoup(raw, "html.parser")
    return soup.get_text(separator=" ", strip=True)
