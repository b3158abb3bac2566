from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel


class ChoiceListProvider(BaseModel, ABC):
    """Base class for all choice list providers."""

    @abstractmethod
    def list_choices(self) -> Optional[List[str]]:
        raise NotImplementedError

    def list_choices_strict(self) -> Optional[List[str]]:
        """List choices, raising provider failures instead of degrading to no choices."""
        return self.list_choices()

    @abstractmethod
    def declared_default(self) -> Optional[str]:
        raise NotImplementedError

    def describe(self) -> str:
        return self.__class__.__name__
