from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from starlette.status import HTTP_400_BAD_REQUEST
from ..schemas import ExtractTextRequest, ExtractionResponse
from ..core.config import settings
from ..core.security import rate_limit
from ..data.base import TextDecoder
from ..data.pdf_text import text_decoder
from ..services.extraction import ExtractionError, extract_from_pdf, extract_from_text

router = APIRouter()

def decoder_dep() -> TextDecoder:
    return text_decoder()

def _response(result) -> dict:
    return {"status": result.status, "data": result.fields()}

@router.post("/extract", response_model=ExtractionResponse)
def post_extract_text(body: ExtractTextRequest, _lim = Depends(rate_limit)):
    return _response(extract_from_text(body.text))

@router.post("/extract/pdf", response_model=ExtractionResponse)
async def post_extract_pdf(
    file: UploadFile | None = File(default=None),
    _lim = Depends(rate_limit),
    decoder: TextDecoder = Depends(decoder_dep),
):
    if file is None:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="No file provided")
    data = await file.read(settings.MAX_UPLOAD_BYTES + 1)
    if len(data) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="File too large")
    try:
        result = extract_from_pdf(data, decoder)
    except ExtractionError as exc:
        # Caller falls back to manual entry
        raise HTTPException(status_code=422, detail=str(exc))
    return _response(result)
