"""
Enhancement Service

Backend side of the enhancement round-trip: validates the submitted
sentence, renders the prompt, and makes one upstream call.
"""

import json
import logging
import time
from typing import Optional

from ilo.prompts.templates import PromptTemplate
from shared.services.llm_service import LLMService, LLMServiceError
from shared.utils.exceptions import EnhancementUpstreamException, MissingILOException

logger = logging.getLogger(__name__)


class EnhancementService:
    """Turns one ILO sentence into raw, heading-delimited feedback text."""

    def __init__(
        self,
        llm_service: LLMService,
        system_prompt: str,
        user_template: PromptTemplate,
    ):
        self.llm = llm_service
        self.system_prompt = system_prompt
        self.user_template = user_template

    def enhance(self, ilo: Optional[str]) -> str:
        """
        Request feedback and an improved version of `ilo`.

        Raises:
            MissingILOException: `ilo` is missing or blank; nothing is sent upstream.
            EnhancementUpstreamException: the upstream call failed.
        """
        if not ilo or not ilo.strip():
            logger.warning(json.dumps({"step": "ENHANCE_ILO", "status": "rejected", "reason": "missing_ilo"}))
            raise MissingILOException()

        start_time = time.time()
        logger.info(json.dumps({
            "step": "ENHANCE_ILO",
            "status": "starting",
            "input": {"ilo_length": len(ilo)},
        }))

        prompt = self.user_template.render(ilo=ilo)
        try:
            enhanced = self.llm.chat(self.system_prompt, prompt)
        except LLMServiceError as e:
            logger.error(json.dumps({
                "step": "ENHANCE_ILO",
                "status": "failed",
                "error": str(e),
                "duration_ms": int((time.time() - start_time) * 1000),
            }))
            raise EnhancementUpstreamException(e) from e

        logger.info(json.dumps({
            "step": "ENHANCE_ILO",
            "status": "complete",
            "output": {"response_length": len(enhanced)},
            "duration_ms": int((time.time() - start_time) * 1000),
        }))
        return enhanced
