"""Data models for the EWWW cloud client."""

from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import STATUS_EXCEEDED, STATUS_GREAT, STATUS_INVALID


class KeyStatus(str, Enum):
    """Status of an API key as reported by the verify endpoint."""

    GREAT = STATUS_GREAT
    EXCEEDED = STATUS_EXCEEDED
    INVALID = STATUS_INVALID


class MetadataPolicy(str, Enum):
    """What the backend should do with EXIF and other metadata."""

    KEEP = "keep"
    STRIP = "strip"


class ConversionRequest(BaseModel):
    """Request model for a single image conversion."""

    model_config = ConfigDict(frozen=True)

    source: Union[Path, bytes]
    source_name: Optional[str] = None
    quality: int = Field(default=85, ge=0, le=100)
    metadata: MetadataPolicy = MetadataPolicy.STRIP
    domain: str = ""

    @field_validator("domain")
    @classmethod
    def strip_domain(cls, v: str) -> str:
        return v.strip()

    @property
    def filename(self) -> str:
        """Name sent with the multipart file part."""
        if self.source_name:
            return self.source_name
        if isinstance(self.source, Path):
            return self.source.name
        return "image"

    def read_source(self) -> bytes:
        """Return the image bytes, reading them from disk if needed."""
        if isinstance(self.source, Path):
            return self.source.read_bytes()
        return self.source


class SuccessOutcome(BaseModel):
    """The backend returned image data."""

    kind: Literal["success"] = "success"
    payload: bytes


class BackendErrorOutcome(BaseModel):
    """The backend returned a structured error, e.g. ``{"error": "invalid"}``."""

    kind: Literal["backend_error"] = "backend_error"
    error_code: str
    raw_message: Optional[str] = None


class AnomalyOutcome(BaseModel):
    """The response could not be interpreted as an image or an error."""

    kind: Literal["protocol_anomaly"] = "protocol_anomaly"
    reason: str
    raw_body: bytes = b""

    @property
    def raw_text(self) -> str:
        return self.raw_body.decode("utf-8", errors="replace")


ConversionOutcome = Annotated[
    Union[SuccessOutcome, BackendErrorOutcome, AnomalyOutcome],
    Field(discriminator="kind"),
]


class KeepAliveResult(BaseModel):
    """Result of a keep-alive ping. Failures only ever produce a warning."""

    ok: bool
    warning: Optional[str] = None
