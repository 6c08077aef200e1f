"""Provider facade pairing one provider's completions and embeddings adapters."""

from __future__ import annotations

from typing import ClassVar, Optional, Type

from .adapter import BaseCompletions, BaseEmbeddings, Settings


class BaseProvider:
    """Entry object returned by the factory.

    Attributes:
        completions: Adapter exposing ``create(messages, ...)``.
        embeddings: Adapter exposing ``create(text, ...)``.

    Both adapters share the optional explicit ``settings``; without it they
    read the installed process configuration on every call.
    """

    name: ClassVar[str] = ""
    completions_cls: ClassVar[Type[BaseCompletions]]
    embeddings_cls: ClassVar[Type[BaseEmbeddings]]
    supports_embeddings: ClassVar[bool] = True

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.completions = self.completions_cls(settings)
        self.embeddings = self.embeddings_cls(settings)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


__all__ = ["BaseProvider"]
