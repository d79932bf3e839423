"""
Declarative configuration base class.

Subclasses declare their fields as annotated class attributes and may
override ``get_default``, ``get_validation_rules`` and ``get_setter_maps``::

    class AppConfiguration(BaseConfiguration):
        debug: bool = False
        maxConnections: int = 10

        def get_default(self):
            return {'max_connections': 100}

        def get_validation_rules(self):
            return {'debug': 'boolean', 'max_connections': 'integer'}

    config = AppConfiguration({'debug': True})
    config.maxConnections    # 100
    config.get('debug')      # True

External keys (``max_connections``, ``max-connections``) are bound to the
camelCase field of the same name. For each key the first of these wins:
a setter registered in ``get_setter_maps``, a ``set_<snake_name>`` method,
assignment to the declared field. ``get``/``set``/``has`` work on the raw
configuration mapping only; ``set`` does not re-bind fields.
"""

import functools
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Set, Tuple, Union

from ..errors import ConfigurationNotFoundError, ConfigurationTypeError
from ..util import nested
from ..util.loader import expand_config_variables, load_config_file, load_config_from_env
from ..util.strings import camel, snake
from .interface import ConfigurationInterface
from .rules import InstanceOf, TypeRule, describe_value

logger = logging.getLogger(__name__)


class BaseConfiguration(ConfigurationInterface):
    """
    Configuration object built from a nested mapping.

    Construction merges ``get_default()`` with the supplied mapping
    (supplied values win, nested mappings merge key by key) and loads the
    result. Every declared validation rule is checked before any field is
    bound; a mismatch raises ConfigurationTypeError.
    """

    def __init__(self, config: Optional[Mapping[str, Any]] = None):
        self._config: Dict[str, Any] = {}
        self.load(nested.merge(self.get_default(), config or {}))

    @classmethod
    def from_file(
        cls,
        file_path: str,
        overrides: Optional[Mapping[str, Any]] = None,
        expand_variables: bool = False
    ) -> "BaseConfiguration":
        """Create a configuration from a JSON or YAML file."""
        data = load_config_file(file_path)
        if expand_variables:
            data = expand_config_variables(data)
        return cls(nested.merge(data, overrides or {}))

    @classmethod
    def from_env(
        cls,
        prefix: str,
        overrides: Optional[Mapping[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None
    ) -> "BaseConfiguration":
        """Create a configuration from prefixed environment variables."""
        return cls(nested.merge(load_config_from_env(prefix, environ), overrides or {}))

    def get(self, path: str) -> Any:
        if not self.has(path):
            raise ConfigurationNotFoundError(path)

        return nested.get(self._config, path)

    def has(self, path: str) -> bool:
        return nested.has(self._config, path)

    def set(self, path: str, value: Any) -> None:
        """
        Update a single path of the raw configuration.

        The value is checked against the rule declared for this exact path.
        Bound fields are left as they were at load time.
        """
        self._check_value(path, value, self._rules().get(path))
        nested.set(self._config, path, value)

    def all(self) -> Dict[str, Any]:
        """Return a copy of the raw configuration."""
        return nested.copy_tree(self._config)

    def load(self, config: Mapping[str, Any]) -> None:
        """
        Validate and bind the given configuration.

        All declared rules are checked and every setter is resolved first,
        so a failing rule or a broken setter map leaves both the raw
        configuration and the bound fields untouched.
        """
        rules = self._rules()
        for path, rule in rules.items():
            if nested.has(config, path):
                self._check_value(path, nested.get(config, path), rule)

        snapshot = nested.copy_tree(config)
        bindings = self._resolve_bindings(snapshot)

        self._config = snapshot
        logger.debug(f"Loading {type(self).__name__} with {len(self._config)} keys")

        for key, value, setter, field in bindings:
            if setter is not None:
                logger.debug(f"Binding {key} through setter {getattr(setter, '__name__', setter)}")
                setter(value)
            else:
                setattr(self, field, value)

    def get_validation_rules(self) -> Dict[str, Union[TypeRule, str, type]]:
        return {}

    def get_setter_maps(self) -> Dict[str, Union[str, Callable[..., Any]]]:
        return {}

    def get_default(self) -> Dict[str, Any]:
        return {}

    def field_name(self, key: str) -> str:
        """Map an external configuration key to its field name (camelCase)."""
        return camel(key)

    def _rules(self) -> Dict[str, TypeRule]:
        return {path: TypeRule.parse(rule) for path, rule in self.get_validation_rules().items()}

    def _check_value(self, path: str, value: Any, rule: Optional[TypeRule]) -> None:
        if rule is None or rule.matches(value):
            return

        error = ConfigurationTypeError(
            snake(path) if isinstance(path, str) else str(path),
            rule.describe(),
            describe_value(value),
            instance_check=isinstance(rule, InstanceOf)
        )
        logger.error(f"{type(self).__name__}: {error}")
        raise error

    def _declared_fields(self) -> Set[str]:
        fields: Set[str] = set()
        for klass in type(self).__mro__:
            fields.update(getattr(klass, '__annotations__', {}).keys())
            fields.update(
                name for name, value in vars(klass).items()
                if not callable(value) and not isinstance(value, (property, classmethod, staticmethod))
            )
        fields.update(vars(self).keys())
        return {name for name in fields if not name.startswith('_')}

    def _resolve_bindings(
        self,
        config: Mapping[str, Any]
    ) -> List[Tuple[str, Any, Optional[Callable[[Any], Any]], str]]:
        setters = self.get_setter_maps()
        fields = self._declared_fields()
        bindings = []
        for key, value in config.items():
            if not isinstance(key, str):
                continue

            field = self.field_name(key)
            setter = self._resolve_setter(field, setters)
            if setter is not None or field in fields:
                bindings.append((key, value, setter, field))
            else:
                logger.debug(f"No field declared for configuration key {key}")
        return bindings

    def _resolve_setter(
        self,
        field: str,
        setters: Mapping[str, Union[str, Callable[..., Any]]]
    ) -> Optional[Callable[[Any], Any]]:
        custom = setters.get(field)
        if callable(custom):
            if getattr(custom, '__self__', None) is self:
                return custom
            return functools.partial(custom, self)
        if custom is not None:
            method = getattr(self, custom, None)
            if not callable(method):
                raise AttributeError(
                    f"Setter {custom} registered for field {field} is not a method "
                    f"of {type(self).__name__}"
                )
            return method

        method = getattr(self, f"set_{snake(field)}", None)
        return method if callable(method) else None

    def __contains__(self, path: str) -> bool:
        return self.has(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"
