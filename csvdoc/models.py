from __future__ import annotations

import base64
import binascii
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidPayloadError

Record = Dict[str, str]


class OutputFormat(str, Enum):
    MARKDOWN = "markdown"
    YAML = "yaml"
    XML = "xml"

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]


_EXTENSIONS = {
    OutputFormat.MARKDOWN: "md",
    OutputFormat.YAML: "yaml",
    OutputFormat.XML: "xml",
}


class RawFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str
    content: Optional[bytes] = None


class SubmittedFile(BaseModel):
    """A file as sent over the wire, with its bytes base64-encoded."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    filename: str
    base64_content: Optional[str] = Field(default=None, alias="base64Content")

    def decode_content(self) -> bytes:
        if not self.base64_content:
            return b""
        try:
            return base64.b64decode(self.base64_content, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidPayloadError(f"Invalid base64 content: {exc}") from exc


class ConvertRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    files: List[SubmittedFile] = Field(default_factory=list)
    output_format: Optional[str] = Field(default=None, alias="outputFormat")


class ConvertedFile(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    filename: str
    file_content: str = Field(alias="fileContent")


class FileError(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str
    message: str


class BatchResult(BaseModel):
    files: List[ConvertedFile] = Field(default_factory=list)
    errors: List[FileError] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str


class FormatInfo(BaseModel):
    name: str
    extension: str


class FormatsResponse(BaseModel):
    formats: List[FormatInfo]


class HealthResponse(BaseModel):
    ok: bool = True
