"""
Interface implemented by every configuration class.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Union


class ConfigurationInterface(ABC):
    """Abstract base class for configuration objects"""

    @abstractmethod
    def get(self, path: str) -> Any:
        """Return the value of the given configuration path"""
        pass

    @abstractmethod
    def has(self, path: str) -> bool:
        """Check whether the given configuration path exists"""
        pass

    @abstractmethod
    def set(self, path: str, value: Any) -> None:
        """Update the value of the given configuration path"""
        pass

    @abstractmethod
    def load(self, config: Dict[str, Any]) -> None:
        """Load (or reload) the configuration"""
        pass

    @abstractmethod
    def get_validation_rules(self) -> Dict[str, Any]:
        """
        Return the validation rules, keyed by dot path:
        - a primitive tag (boolean, integer, float, string, array, null)
        - a class, or ``object::package.module.ClassName``
        - a TypeRule instance
        """
        pass

    @abstractmethod
    def get_setter_maps(self) -> Dict[str, Union[str, Callable[..., Any]]]:
        """Return the setter maps: field name -> method name or callable"""
        pass

    @abstractmethod
    def get_default(self) -> Dict[str, Any]:
        """Return the default configuration"""
        pass
