"""External service clients for the Azure vision and language-model APIs"""

from .azure_vision_client import AzureVisionClient
from .azure_openai_client import AzureOpenAIClient

__all__ = [
    "AzureVisionClient",
    "AzureOpenAIClient",
]
