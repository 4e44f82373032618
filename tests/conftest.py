import io

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas


def render_pdf(*pages: str) -> bytes:
    """Render one PDF page per string; an empty string leaves the page blank."""
    buf = io.BytesIO()
    doc = canvas.Canvas(buf, pagesize=A4)
    for text in pages:
        if text:
            doc.drawString(72, 760, text)
        doc.showPage()
    doc.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    return render_pdf("Quarterly intake report")


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    return render_pdf("Cover letter", "Signed agreement")


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """A valid PDF whose only page carries no text."""
    return render_pdf("")
