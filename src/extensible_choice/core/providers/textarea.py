from __future__ import annotations

import re
from typing import List, Optional

from .base import ChoiceListProvider

_LINE_BREAK = re.compile(r"\r\n|\n|\r")


class TextareaChoiceListProvider(ChoiceListProvider):
    """Choices written one per line in a block of text."""

    choice_list_text: Optional[str] = None
    default_choice: Optional[str] = None

    def list_choices(self) -> List[str]:
        if not self.choice_list_text:
            return []
        lines = _LINE_BREAK.split(self.choice_list_text)
        while lines and lines[-1] == "":
            lines.pop()
        return lines

    def declared_default(self) -> Optional[str]:
        return self.default_choice

    def describe(self) -> str:
        return f"textarea ({len(self.list_choices())} choice(s))"
