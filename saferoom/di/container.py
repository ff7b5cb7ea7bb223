# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import AnalysisProvider


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers.
    """
    
    def __init__(self) -> None:
        super().__init__()
        self.setup()
    
    def setup(self) -> None:
        """Setup dependency registrations by composing all providers."""
        AnalysisProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)
    
    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
