import io
import pdfplumber
from .base import TextDecoder

class PdfPlumberDecoder(TextDecoder):
    """
    Reads the text layer of a PDF. No OCR: scanned pages come back empty.
    """
    def decode(self, data: bytes) -> str:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            return "\n".join(page.extract_text() or "" for page in pdf.pages)

def text_decoder() -> TextDecoder:
    return PdfPlumberDecoder()
