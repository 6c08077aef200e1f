"""Caller-side utilities built on the adapters."""

from .batch import BatchFailure, EmbeddingBatchReport, embed_many

__all__ = ["BatchFailure", "EmbeddingBatchReport", "embed_many"]
