"""
Batch conversion: decode -> parse -> serialize for every submitted file.

Each file is handled on its own; a failure is recorded against that file
and the batch moves on. Only an empty submission or a batch in which
nothing converted is raised to the caller.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Union

from .config import get_settings
from .decoding import decode_bytes
from .errors import ConversionError, EmptyInputError, NoConvertibleDataError
from .logging_config import get_logger
from .models import BatchResult, ConvertedFile, FileError, OutputFormat, RawFile, SubmittedFile
from .serializers import resolve_format, serialize
from .tabular import parse_records

logger = get_logger(__name__)

InputFile = Union[RawFile, SubmittedFile]

NOTHING_CONVERTED = "No convertible data found in the submitted files"


def output_filename(filename: str, output_format: OutputFormat) -> str:
    stem = filename.rsplit(".", 1)[0] if "." in filename else filename
    return f"{stem}.{output_format.extension}"


def _read_payload(file: InputFile) -> bytes:
    if isinstance(file, SubmittedFile):
        return file.decode_content()
    return file.content or b""


def convert_file(
    file: InputFile, output_format: object, fallback_encoding: str
) -> Optional[ConvertedFile]:
    """
    Convert one file, or return None when it holds no data rows.

    Raises a ConversionError subclass for any per-file failure.
    """
    raw = _read_payload(file)
    if not raw:
        raise EmptyInputError("File has empty content")

    text = decode_bytes(raw, fallback_encoding=fallback_encoding)
    records = parse_records(text)
    if not records:
        return None

    fmt = resolve_format(output_format)
    return ConvertedFile(
        filename=output_filename(file.filename, fmt),
        file_content=serialize(records, fmt),
    )


def convert_batch(
    files: Sequence[InputFile], output_format: Optional[object]
) -> BatchResult:
    if not files:
        raise EmptyInputError("No files were submitted")
    if output_format is None or output_format == "":
        raise EmptyInputError("No output format was specified")

    fallback_encoding = get_settings().fallback_encoding
    converted: List[ConvertedFile] = []
    errors: List[FileError] = []

    for file in files:
        try:
            result = convert_file(file, output_format, fallback_encoding)
        except ConversionError as exc:
            logger.warning("file_failed", filename=file.filename, error=str(exc))
            errors.append(FileError(filename=file.filename, message=f"{file.filename}: {exc}"))
            continue

        if result is None:
            logger.info("file_skipped", filename=file.filename, reason="no data rows")
            continue

        logger.info("file_converted", filename=file.filename, output=result.filename)
        converted.append(result)

    if converted:
        return BatchResult(files=converted, errors=errors)

    if errors:
        message = "\n".join(error.message for error in errors)
    else:
        message = NOTHING_CONVERTED
    logger.error("batch_failed", files=len(files), errors=len(errors))
    raise NoConvertibleDataError(message)
