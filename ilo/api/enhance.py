"""ILO enhancement API endpoint."""
from fastapi import APIRouter, Depends

from config import get_settings
from ilo.prompts.templates import build_enhancement_template
from ilo.services.enhancement_service import EnhancementService
from shared.models import EnhanceILORequest, EnhanceILOResponse, ErrorResponse
from shared.services.llm_service import LLMService

router = APIRouter(tags=["enhance"])


def get_enhancement_service() -> EnhancementService:
    """Build the enhancement service from application settings."""
    settings = get_settings()
    llm_service = LLMService(
        api_key=settings.openai_api_key,
        model_id=settings.llm_model,
        azure_endpoint=settings.azure_openai_endpoint,
        api_version=settings.openai_api_version,
        max_tokens=settings.llm_max_tokens,
        timeout=settings.llm_timeout_seconds,
    )
    return EnhancementService(
        llm_service=llm_service,
        system_prompt=settings.enhancement_system_prompt,
        user_template=build_enhancement_template(settings.enhancement_user_template),
    )


@router.post(
    "/enhance-ilo",
    response_model=EnhanceILOResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def enhance_ilo(
    request: EnhanceILORequest,
    service: EnhancementService = Depends(get_enhancement_service),
):
    """Return feedback and an improved version of the submitted ILO."""
    return EnhanceILOResponse(enhanced_ilo=service.enhance(request.ilo))
