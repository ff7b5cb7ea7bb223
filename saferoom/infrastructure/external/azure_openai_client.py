"""Azure OpenAI chat completions client."""
import logging
from typing import Any, Dict, List, Optional

import httpx

from ...core.config import get_settings
from ...core.exceptions import UpstreamServiceError
from .base_upstream_client import BaseUpstreamClient

logger = logging.getLogger(__name__)


class AzureOpenAIClient(BaseUpstreamClient):
    """
    HTTP client for a deployment-scoped Azure OpenAI chat completions endpoint.
    
    Returns the text of the first completion choice; interpreting that text
    is left to the caller.
    """
    
    service_name = "language-model"
    
    def __init__(
        self,
        endpoint: Optional[str] = None,
        api_key: Optional[str] = None,
        deployment: Optional[str] = None,
        api_version: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize Azure OpenAI client.
        
        Args:
            endpoint: Azure OpenAI resource base URL. If None, reads from settings.
            api_key: API key. If None, reads from settings.
            deployment: Model deployment name. If None, reads from settings.
            api_version: REST API version. If None, uses the pinned version.
            http_client: Optional HTTP client (defaults to the shared pool).
        """
        super().__init__(http_client)
        settings = get_settings()
        self.endpoint = (endpoint if endpoint is not None else settings.azure_openai_endpoint).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.azure_openai_key
        self.deployment = deployment if deployment is not None else settings.azure_openai_deployment
        self.api_version = api_version or settings.azure_openai_api_version
        
        if not self.endpoint or not self.api_key or not self.deployment:
            logger.warning(
                "AZURE_OPENAI_ENDPOINT, AZURE_OPENAI_KEY or AZURE_OPENAI_DEPLOYMENT not configured"
            )
    
    @property
    def chat_completions_url(self) -> str:
        return (
            f"{self.endpoint}/openai/deployments/{self.deployment}/chat/completions"
            f"?api-version={self.api_version}"
        )
    
    async def complete(
        self,
        messages: List[Dict[str, str]],
        temperature: float,
        max_tokens: int,
    ) -> str:
        """
        Run one chat completion.
        
        Args:
            messages: Role-tagged messages ({"role": ..., "content": ...})
            temperature: Sampling temperature, lower = more deterministic
            max_tokens: Maximum tokens in the completion
            
        Returns:
            Message content of the first choice ("" when the model returned no text)
            
        Raises:
            UpstreamServiceError: On request failure, non-2xx status, or a body without choices
        """
        headers = {
            "api-key": self.api_key,
            "Content-Type": "application/json",
        }
        payload = {
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        
        logger.debug(f"Calling Azure OpenAI deployment: {self.deployment}")
        response = await self._post(self.chat_completions_url, json=payload, headers=headers)
        
        try:
            result: Any = response.json()
        except ValueError:
            result = response.text
        
        choices = result.get("choices") if isinstance(result, dict) else None
        if not choices or not isinstance(choices[0], dict):
            raise UpstreamServiceError(
                "language-model API returned no completion choices",
                service=self.service_name,
                details=result,
                status_code=response.status_code,
            )
        
        message = choices[0].get("message") or {}
        content = message.get("content") if isinstance(message, dict) else None
        return content if isinstance(content, str) else ""
