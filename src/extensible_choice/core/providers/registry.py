"""Provider Registry: Extensible registration system for choice list provider types."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Type

from pydantic import BaseModel, PrivateAttr

from .base import ChoiceListProvider

Evaluator = Callable[[str], Any]
ProviderBuilder = Callable[[Any, Optional[Evaluator]], ChoiceListProvider]


class ProviderRegistry(BaseModel):
    """Registry for provider spec parsers and builders."""

    _spec_map: Dict[str, Type[BaseModel]] = PrivateAttr(default_factory=dict)
    _builder_map: Dict[str, ProviderBuilder] = PrivateAttr(default_factory=dict)

    def register(
        self,
        type_name: str,
        spec_class: Type[BaseModel],
        builder_func: ProviderBuilder,
    ) -> None:
        """
        Register a new provider type.

        Args:
            type_name: The "type" value in YAML (e.g., "textarea")
            spec_class: Pydantic model for parsing YAML
            builder_func: Function building the runtime provider from a spec and
                an optional script evaluator
        """
        if type_name in self._spec_map:
            raise ValueError(f"Duplicate provider type: {type_name}")
        self._spec_map[type_name] = spec_class
        self._builder_map[spec_class.__name__] = builder_func

    def parse_spec(self, data: Dict[str, Any]) -> BaseModel:
        """
        Parse YAML data into a provider spec.

        Raises:
            ValueError: If the provider type is missing or unknown
        """
        ptype = data.get("type")
        if not ptype:
            raise ValueError("Provider spec must have a 'type' field")

        spec_class = self._spec_map.get(ptype)
        if not spec_class:
            known = self.list_registered_types()
            raise ValueError(f"Unknown provider type: {ptype} (known: {known})")

        return spec_class.model_validate(data)

    def build_provider(self, spec: Any, evaluator: Optional[Evaluator] = None) -> ChoiceListProvider:
        """
        Build a runtime provider from a spec.

        Raises:
            TypeError: If no builder is registered for the spec type
        """
        spec_type_name = type(spec).__name__
        builder = self._builder_map.get(spec_type_name)

        if not builder:
            raise TypeError(f"No builder registered for spec type: {spec_type_name}")

        return builder(spec, evaluator)

    def list_registered_types(self) -> list[str]:
        """Return list of all registered provider type names."""
        return list(self._spec_map.keys())


# Global singleton instance
_global_provider_registry = ProviderRegistry()


def get_provider_registry() -> ProviderRegistry:
    """Get the global provider registry instance."""
    return _global_provider_registry


def register_provider(
    type_name: str,
    spec_class: Type[BaseModel],
    builder_func: ProviderBuilder,
) -> None:
    """Register a provider type on the global registry."""
    _global_provider_registry.register(type_name, spec_class, builder_func)


__all__ = [
    "ProviderRegistry",
    "get_provider_registry",
    "register_provider",
]
