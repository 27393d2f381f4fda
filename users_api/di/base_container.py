# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal dependency injection container.
    
    Singletons are stored instances returned as-is; factories are called on
    every get(). Keys are usually interface classes, but plain string keys
    are accepted as well.
    """
    
    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}
    
    def register_singleton(self, key: Hashable, instance: Any) -> None:
        self._factories.pop(key, None)
        self._singletons[key] = instance
    
    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        self._singletons.pop(key, None)
        self._factories[key] = factory
    
    def get(self, key: Hashable) -> Any:
        """
        Resolve a registered dependency
        
        Args:
            key: Registration key (class or string)
            
        Returns:
            Singleton instance, or a fresh instance from the factory
            
        Raises:
            ValueError: If nothing is registered under key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise ValueError(f"No dependency registered for {name}")
