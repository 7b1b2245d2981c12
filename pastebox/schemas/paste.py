"""Paste API schemas."""

from pydantic import BaseModel, Field


class PasteUploadResponse(BaseModel):
    """Response for POST / (paste created)."""

    id: str = Field(..., description="Paste key")
    url: str = Field(..., description="Absolute URL of the paste content")
    delete_key: str | None = Field(
        None, description="Credential for DELETE; shown only once, null when deletion is disabled"
    )


class ErrorResponse(BaseModel):
    """Error body returned for every PasteException."""

    error: str
    message: str
    details: dict = Field(default_factory=dict)
