"""
LLM Service: Centralized interface for chat-completion calls.

Talks to either OpenAI or an Azure OpenAI deployment, depending on whether
an Azure endpoint is configured. Each call is a single attempt: the SDK's
own retry loop is disabled and failures surface as LLMServiceError.
"""

import json
import time
from typing import Any, Dict, List, Optional
from openai import AzureOpenAI, OpenAI, OpenAIError, APITimeoutError
import logging

logger = logging.getLogger(__name__)


class LLMService:
    """
    Service for making chat-completion calls with structured lifecycle logging.

    `model_id` is the OpenAI model name, or the deployment name when
    `azure_endpoint` is given.
    """

    def __init__(
        self,
        api_key: str,
        *,
        model_id: str,
        azure_endpoint: Optional[str] = None,
        api_version: Optional[str] = None,
        max_tokens: int = 400,
        timeout: float = 60.0,
    ):
        if azure_endpoint:
            self.client = AzureOpenAI(
                api_key=api_key,
                azure_endpoint=azure_endpoint,
                api_version=api_version,
                max_retries=0,
            )
            self.provider = "azure"
        else:
            self.client = OpenAI(api_key=api_key, max_retries=0)
            self.provider = "openai"
        self.model_id = model_id
        self.max_tokens = max_tokens
        self.timeout = timeout

    def chat(self, system_prompt: str, user_prompt: str) -> str:
        """
        Send one system + user exchange and return the assistant's raw text.

        Raises:
            LLMServiceError: on any provider failure, timeout, or empty reply.
        """
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]
        return self._call_chat_completions(messages)

    # ─── OpenAI Chat Completions API ──────────────────────────────────

    def _call_chat_completions(self, messages: List[Dict[str, str]]) -> str:
        logger.info(json.dumps({
            "step": "LLM_CALL",
            "status": "starting",
            "provider": self.provider,
            "model": self.model_id,
            "params": {"max_tokens": self.max_tokens, "messages": len(messages)},
        }))

        def _api_call():
            response = self.client.chat.completions.create(
                model=self.model_id,
                messages=messages,
                max_tokens=self.max_tokens,
                timeout=self.timeout,
            )
            return response.choices[0].message.content

        return self._execute(_api_call, self.model_id)

    # ─── Helpers ──────────────────────────────────────────────────────

    def _execute(self, api_call_fn, model_name: str) -> Any:
        """Run the API call once, logging its outcome and mapping errors."""
        start_time = time.time()
        try:
            result = api_call_fn()
        except APITimeoutError as e:
            self._log_failure(model_name, e, start_time)
            raise LLMServiceError(f"{model_name} timed out after {self.timeout}s") from e
        except OpenAIError as e:
            self._log_failure(model_name, e, start_time)
            raise LLMServiceError(f"{model_name} API error: {str(e)}") from e
        except Exception as e:
            self._log_failure(model_name, e, start_time)
            raise LLMServiceError(f"{model_name} unexpected error: {str(e)}") from e

        if not result:
            self._log_failure(model_name, "empty completion", start_time)
            raise LLMServiceError(f"{model_name} returned an empty completion")

        logger.info(json.dumps({
            "step": "LLM_CALL",
            "status": "complete",
            "model": model_name,
            "output": {"response_length": len(result)},
            "duration_ms": int((time.time() - start_time) * 1000),
        }))
        return result

    @staticmethod
    def _log_failure(model_name: str, error: Any, start_time: float) -> None:
        logger.error(json.dumps({
            "step": "LLM_CALL",
            "status": "failed",
            "model": model_name,
            "error": str(error),
            "duration_ms": int((time.time() - start_time) * 1000),
        }))


class LLMServiceError(Exception):
    """Custom exception for LLM service errors"""
    pass
