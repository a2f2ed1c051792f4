"""
Pull assessment figures out of a Montréal "rôle d'évaluation" extract.

The input is plain text, either pasted from the city's site or decoded from
the text layer of the assessment PDF. Labels are French; numbers use spaces
or commas as thousands separators and "." as the only decimal mark.
"""
import logging
import re

from ..core.metrics import EXTRACTIONS
from ..core.units import square_meters_to_square_feet
from ..data.base import ExtractionResult, TextDecoder

log = logging.getLogger(__name__)

# Separators between digits: space, comma, no-break and narrow no-break space.
# Never a line break, so a figure cannot run into the next line.
_INT = r"(\d(?:[ ,\u00a0\u202f]?\d)*)"
_DECIMAL = r"(\d(?:[ ,\u00a0\u202f]?\d)*(?:\.\d+)?)"
_LEAD = r"[\s:]*\$?\s*"
_THOUSANDS = re.compile(r"[\s,]")

MUNICIPAL_VALUE_RE = re.compile(
    r"(?:Valeur\s+de\s+l['’]\s*immeuble|Valeur\s+totale)" + _LEAD + _INT, re.IGNORECASE
)
LAND_VALUE_RE = re.compile(r"Valeur\s+du\s+terrain" + _LEAD + _INT, re.IGNORECASE)
YEAR_BUILT_RE = re.compile(r"Ann[ée]e\s+de\s+construction[\s:]*(\d{4})(?!\d)", re.IGNORECASE)
LOT_SIZE_RE = re.compile(
    r"Superficie(?:\s+du\s+terrain)?[\s:]*" + _DECIMAL + r"\s*m(?:²|2(?!\d))", re.IGNORECASE
)

class ExtractionError(Exception):
    """The source text could not be obtained (unreadable or corrupt document)."""

def _to_int(digits: str) -> int:
    return int(_THOUSANDS.sub("", digits))

def extract_fields(text: str) -> ExtractionResult:
    """
    Locate the four assessment fields in ``text``.

    Missing labels simply leave the field unset; the result's ``status``
    tells the caller how much was recognised.
    """
    found = {}

    m = MUNICIPAL_VALUE_RE.search(text)
    if m:
        found["municipal_value"] = _to_int(m.group(1))

    m = LAND_VALUE_RE.search(text)
    if m:
        found["land_value"] = _to_int(m.group(1))

    m = YEAR_BUILT_RE.search(text)
    if m:
        found["year_built"] = int(m.group(1))

    m = LOT_SIZE_RE.search(text)
    if m:
        square_meters = float(_THOUSANDS.sub("", m.group(1)))
        found["lot_size"] = square_meters_to_square_feet(square_meters)

    return ExtractionResult(**found)

def extract_from_text(text: str, source: str = "text") -> ExtractionResult:
    result = extract_fields(text)
    EXTRACTIONS.labels(source=source, status=result.status).inc()
    log.info("extraction %s from %s: %s", result.status, source, sorted(result.fields()))
    return result

def extract_from_pdf(data: bytes, decoder: TextDecoder) -> ExtractionResult:
    """Decode the PDF text layer with ``decoder`` then extract fields."""
    try:
        text = decoder.decode(data)
    except Exception as exc:
        EXTRACTIONS.labels(source="pdf", status="failed").inc()
        log.warning("pdf text decoding failed: %s", exc)
        raise ExtractionError("Failed to parse PDF") from exc
    return extract_from_text(text, source="pdf")
