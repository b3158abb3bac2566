from .base import ChoiceListProvider
from .forms import NO_DEFAULT_CHOICE, check_script, decode_default_choice, fill_default_choice_items
from .registry import ProviderRegistry, get_provider_registry, register_provider
from .script import ScriptChoiceListProvider, run_script
from .specs import ScriptProviderSpec, TextareaProviderSpec, build_provider, parse_provider_spec
from .textarea import TextareaChoiceListProvider

__all__ = [
    "ChoiceListProvider",
    "NO_DEFAULT_CHOICE",
    "ProviderRegistry",
    "ScriptChoiceListProvider",
    "ScriptProviderSpec",
    "TextareaChoiceListProvider",
    "TextareaProviderSpec",
    "build_provider",
    "check_script",
    "decode_default_choice",
    "fill_default_choice_items",
    "get_provider_registry",
    "parse_provider_spec",
    "register_provider",
    "run_script",
]
