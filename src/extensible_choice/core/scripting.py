"""Script evaluation collaborator used by script-backed choice providers."""

from __future__ import annotations

import ast
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

RESULT_NAME = "result"


@runtime_checkable
class ScriptEvaluator(Protocol):
    """Evaluate script text and return whatever value the script produced."""

    def __call__(self, script_text: str) -> Any: ...


class PythonScriptEvaluator:
    """
    Evaluate choice scripts written in Python.

    The value of a trailing expression statement is the script's result. When the
    script ends with any other statement, the value bound to ``result`` is used,
    or ``None`` when nothing was bound.

    Every call runs in a fresh namespace seeded with a shallow copy of
    ``bindings``, so concurrent evaluations never share interpreter state.
    """

    def __init__(self, bindings: Optional[Mapping[str, Any]] = None, filename: str = "<choice-script>"):
        self.bindings: Dict[str, Any] = dict(bindings or {})
        self.filename = filename

    def __call__(self, script_text: str) -> Any:
        module = ast.parse(script_text or "", filename=self.filename, mode="exec")
        namespace: Dict[str, Any] = {"__name__": "__choice_script__", **self.bindings}

        tail: Optional[ast.expr] = None
        if module.body and isinstance(module.body[-1], ast.Expr):
            tail = module.body.pop().value

        if module.body:
            exec(compile(module, self.filename, "exec"), namespace)

        if tail is not None:
            expression = ast.Expression(body=tail)
            ast.fix_missing_locations(expression)
            return eval(compile(expression, self.filename, "eval"), namespace)
        return namespace.get(RESULT_NAME)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bindings={sorted(self.bindings)!r})"


__all__ = ["PythonScriptEvaluator", "RESULT_NAME", "ScriptEvaluator"]
