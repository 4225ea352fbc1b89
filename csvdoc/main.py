from typing import List

from fastapi import FastAPI, File, Query, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .convert import convert_batch
from .errors import ConversionError
from .models import (
    ConvertedFile,
    ConvertRequest,
    ErrorResponse,
    FormatInfo,
    FormatsResponse,
    HealthResponse,
    OutputFormat,
    RawFile,
)

app = FastAPI(
    title="csv-docgen",
    description="Convert CSV/TSV files into Markdown, YAML or XML documents",
    version="0.1.0",
)

_ERROR_RESPONSES = {422: {"model": ErrorResponse}}


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=422, content={"error": message})


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    message = "\n".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return _error(message)


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.get("/formats", response_model=FormatsResponse)
def formats():
    return {
        "formats": [FormatInfo(name=fmt.value, extension=fmt.extension) for fmt in OutputFormat]
    }


@app.post("/convert", response_model=List[ConvertedFile], responses=_ERROR_RESPONSES)
def convert(request: ConvertRequest):
    try:
        result = convert_batch(request.files, request.output_format)
    except ConversionError as exc:
        return _error(str(exc))
    return result.files


@app.post("/convert/upload", response_model=List[ConvertedFile], responses=_ERROR_RESPONSES)
async def convert_upload(
    files: List[UploadFile] = File(...),
    output_format: str = Query(...),
):
    raw_files = [
        RawFile(filename=upload.filename or "", content=await upload.read())
        for upload in files
    ]
    try:
        result = convert_batch(raw_files, output_format)
    except ConversionError as exc:
        return _error(str(exc))
    return result.files
