"""Pydantic API request/response schemas."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class EnhanceILORequest(BaseModel):
    """Request to enhance a composed ILO sentence."""
    ilo: Optional[str] = Field(default=None, description="The derived ILO sentence")


class EnhanceILOResponse(BaseModel):
    """Raw heading-delimited feedback text from the enhancement service."""
    model_config = ConfigDict(populate_by_name=True)

    enhanced_ilo: str = Field(alias="enhancedILO")


class ErrorResponse(BaseModel):
    """Failure body shared by every error status."""
    error: str
    details: str
    code: str
