from typing import TYPE_CHECKING
from ...application.use_cases.analysis.analyze_room import AnalyzeRoomUseCase
from ...infrastructure.external.azure_openai_client import AzureOpenAIClient
from ...infrastructure.external.azure_vision_client import AzureVisionClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AnalysisProvider:
    """Analysis provider - registers upstream clients and the room analysis use case"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register room analysis dependencies.
        Clients are stateless singletons; the use case is created on-demand via factory.
        """
        # Register AzureVisionClient as singleton if not already registered
        try:
            container.get(AzureVisionClient)
        except ValueError:
            container.register_singleton(AzureVisionClient, AzureVisionClient())
        
        # Register AzureOpenAIClient as singleton if not already registered
        try:
            container.get(AzureOpenAIClient)
        except ValueError:
            container.register_singleton(AzureOpenAIClient, AzureOpenAIClient())
        
        # Register AnalyzeRoomUseCase
        container.register_factory(
            AnalyzeRoomUseCase,
            lambda: AnalyzeRoomUseCase(
                vision_client=container.get(AzureVisionClient),
                openai_client=container.get(AzureOpenAIClient),
            )
        )
