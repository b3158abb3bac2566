from __future__ import annotations

"""Form-layer helpers for configuring script-backed providers.

The "no default" sentinel only exists in this layer; providers and parameter
definitions always see ``None`` instead.
"""

import logging
from typing import Any, Callable, List, Optional

from pydantic import BaseModel

from extensible_choice.core.errors import (
    ChoiceProviderError,
    InvalidResultTypeError,
    NoScriptResultError,
    ScriptEvaluationError,
)

from .script import run_script

logger = logging.getLogger(__name__)

NO_DEFAULT_CHOICE = "###NODEFAULTCHOICE###"
NO_DEFAULT_LABEL = "(No default choice)"


class ChoiceItem(BaseModel):
    label: str
    value: str


class ScriptCheckResult(BaseModel):
    ok: bool
    message: str


def decode_default_choice(raw: Optional[str]) -> Optional[str]:
    """Translate the form sentinel into ``None``."""
    if raw == NO_DEFAULT_CHOICE:
        return None
    return raw


def fill_default_choice_items(script_text: str, evaluator: Callable[[str], Any]) -> List[ChoiceItem]:
    """Build the selector items offered as a script provider's default choice."""
    items = [ChoiceItem(label=NO_DEFAULT_LABEL, value=NO_DEFAULT_CHOICE)]
    try:
        choices = run_script(script_text, evaluator)
    except ChoiceProviderError:
        logger.warning("Failed to execute script", exc_info=True)
        return items
    items.extend(ChoiceItem(label=choice, value=choice) for choice in choices)
    return items


def check_script(script_text: str, evaluator: Callable[[str], Any]) -> ScriptCheckResult:
    """Run a script strictly, reporting failures to whoever is authoring it."""
    try:
        choices = run_script(script_text, evaluator)
    except ScriptEvaluationError as exc:
        return ScriptCheckResult(ok=False, message=str(exc))
    except NoScriptResultError:
        return ScriptCheckResult(ok=False, message="Script returned null.")
    except InvalidResultTypeError as exc:
        return ScriptCheckResult(ok=False, message=str(exc))
    return ScriptCheckResult(ok=True, message="\n".join(choices))


__all__ = [
    "ChoiceItem",
    "NO_DEFAULT_CHOICE",
    "NO_DEFAULT_LABEL",
    "ScriptCheckResult",
    "check_script",
    "decode_default_choice",
    "fill_default_choice_items",
]
