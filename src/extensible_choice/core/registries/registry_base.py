from __future__ import annotations

import difflib
from typing import Dict, Generic, Iterable, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class NameRegistry(BaseModel, Generic[T]):
    """Items keyed by a unique name, kept in registration order."""

    items: Dict[str, T] = Field(default_factory=dict)

    def register(self, name: str, item: T) -> None:
        if name in self.items:
            raise ValueError(f"Duplicate registration: {name}")
        self.items[name] = item

    def find(self, name: str) -> Optional[T]:
        return self.items.get(name)

    def get(self, name: str) -> T:
        item = self.find(name)
        if item is None:
            raise KeyError(self._unknown_message(name))
        return item

    def _unknown_message(self, name: str) -> str:
        message = f"Unknown: {name}. Available: {', '.join(self.names()) or '<none>'}"
        close = difflib.get_close_matches(name, list(self.items), n=1)
        if close:
            message += f". Did you mean {close[0]!r}?"
        return message

    def all(self) -> Iterable[T]:
        return self.items.values()

    def names(self) -> list[str]:
        return sorted(self.items.keys())

    def __contains__(self, name: object) -> bool:
        return name in self.items

    def __len__(self) -> int:
        return len(self.items)
