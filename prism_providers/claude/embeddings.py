"""Claude has no embeddings endpoint; calls fail with ``UnsupportedOperationError``."""

from __future__ import annotations

from typing import Any, List, Optional

from ..base.adapter import BaseEmbeddings
from ..base.errors import UnsupportedOperationError


class Embeddings(BaseEmbeddings):
    provider_name = "claude"
    default_model = ""

    def create(self, text: Any, *, model: Optional[str] = None, **extra: Any) -> List[float]:
        raise UnsupportedOperationError("Claude does not provide an embeddings API", self.provider_name)


__all__ = ["Embeddings"]
