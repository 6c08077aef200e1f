"""Sequential batch embedding with per-item failure isolation.

``embed_many`` calls ``Embeddings.create`` once per item, in order. A
``ProviderError`` on one item is logged and recorded in the report, and the
batch continues; any other exception is a programming error and propagates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Tuple, Union

from ..errors import ProviderError
from ..log_support import LogContext
from ..logging import get_logger, normalized_log_event

_logger = get_logger("prism.batch")


@dataclass(frozen=True)
class BatchFailure:
    key: Hashable
    error: ProviderError


@dataclass
class EmbeddingBatchReport:
    """Outcome of :func:`embed_many`.

    Attributes:
        vectors: Successful vectors keyed by item key (index for sequences).
        failures: One entry per failed item, in input order.
    """

    vectors: Dict[Hashable, List[float]] = field(default_factory=dict)
    failures: List[BatchFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.vectors)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def total(self) -> int:
        return self.succeeded + self.failed


def _keyed(items: Union[Mapping[Hashable, str], Iterable[str]]) -> Iterable[Tuple[Hashable, Any]]:
    if isinstance(items, Mapping):
        return items.items()
    return enumerate(items)


def embed_many(
    embeddings: Any,
    items: Union[Mapping[Hashable, str], Iterable[str]],
    *,
    model: Optional[str] = None,
    **extra: Any,
) -> EmbeddingBatchReport:
    """Embed every item with ``embeddings.create`` and return a report.

    Parameters
    ----------
    embeddings:
        Any object exposing ``create(text, model=..., **extra) -> list[float]``
        (a provider's ``embeddings`` adapter).
    items:
        A mapping of record key to text, or an iterable of texts (keyed by
        position).
    model, **extra:
        Forwarded to every ``create`` call.
    """
    report = EmbeddingBatchReport()
    provider = getattr(embeddings, "provider_name", None)
    for key, text in _keyed(items):
        try:
            report.vectors[key] = embeddings.create(text, model=model, **extra)
        except ProviderError as exc:
            report.failures.append(BatchFailure(key=key, error=exc))
            normalized_log_event(
                _logger,
                "batch.item_failed",
                LogContext(provider=provider, model=model, operation="embedding"),
                phase="item",
                error_code=exc.code.value,
                key=str(key),
                error=exc.message,
            )
    normalized_log_event(
        _logger,
        "batch.end",
        LogContext(provider=provider, model=model, operation="embedding"),
        phase="finalize",
        succeeded=report.succeeded,
        failed=report.failed,
    )
    return report


__all__ = ["BatchFailure", "EmbeddingBatchReport", "embed_many"]
