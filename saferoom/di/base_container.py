# Standard library imports
from typing import Any, Callable, Dict, Type, TypeVar

T = TypeVar("T")


class BaseContainer:
    """
    Minimal dependency injection container.
    
    Holds two kinds of registrations keyed by type:
    - singletons: one shared, stateless instance (HTTP clients)
    - factories: called on every get() (use cases)
    """
    
    def __init__(self) -> None:
        self._singletons: Dict[type, Any] = {}
        self._factories: Dict[type, Callable[[], Any]] = {}
    
    def register_singleton(self, interface: Type[T], instance: T) -> None:
        self._singletons[interface] = instance
    
    def register_factory(self, interface: Type[T], factory: Callable[[], T]) -> None:
        self._factories[interface] = factory
    
    def get(self, interface: Type[T]) -> T:
        """
        Resolve a registered dependency
        
        Raises:
            ValueError: If nothing is registered for the type
        """
        if interface in self._singletons:
            return self._singletons[interface]
        if interface in self._factories:
            return self._factories[interface]()
        raise ValueError(f"No registration for {interface.__name__}")
