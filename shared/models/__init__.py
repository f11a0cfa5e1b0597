"""Shared API models."""
from shared.models.schemas import EnhanceILORequest, EnhanceILOResponse, ErrorResponse

__all__ = ["EnhanceILORequest", "EnhanceILOResponse", "ErrorResponse"]
