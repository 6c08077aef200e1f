"""prism_providers.config.defaults
==============================

Central place for the stable default values used across prism_providers:
endpoints, default models and transport timeouts. Values here are overridden
per call (``model=...``) or through configuration (``base_url``), never
mutated at runtime.

This module imports nothing from the rest of the package so every layer can
depend on it without cycles. Only plain constants live here.
"""

from __future__ import annotations

# ---- Transport ----
DEFAULT_READ_TIMEOUT_SECONDS = 60.0
DEFAULT_OPEN_TIMEOUT_SECONDS = 60.0

# ---- Dispatcher ----
DEFAULT_PROVIDER = "openai"

# ---- OpenAI ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
OPENAI_DEFAULT_EMBEDDING_MODEL = "text-embedding-3-small"

# ---- Claude (Anthropic Messages API) ----
CLAUDE_DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
CLAUDE_DEFAULT_MODEL = "claude-opus-4-1"
CLAUDE_DEFAULT_MAX_TOKENS = 1024
CLAUDE_API_VERSION = "2023-06-01"
CLAUDE_SCHEMA_TOOL_NAME = "structured_output"
CLAUDE_SCHEMA_TOOL_DESCRIPTION = "Return a JSON object that strictly follows the provided input_schema."

# ---- Gemini (OpenAI-compatible endpoint) ----
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai"
GEMINI_DEFAULT_MODEL = "gemini-2.5-flash"
GEMINI_DEFAULT_EMBEDDING_MODEL = "gemini-embedding-001"

# ---- OpenRouter ----
OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
OPENROUTER_DEFAULT_MODEL = "openai/gpt-4o-mini"
OPENROUTER_DEFAULT_EMBEDDING_MODEL = "text-embedding-3-small"

# ---- Ollama ----
OLLAMA_DEFAULT_MODEL = "llama3.1:8b"
OLLAMA_DEFAULT_EMBEDDING_MODEL = "nomic-embed-text"
OLLAMA_CHAT_PATH = "api/chat"
OLLAMA_EMBEDDINGS_PATH = "api/embeddings"
OLLAMA_EMBEDDINGS_PARAM = "prompt"

__all__ = [
    "DEFAULT_READ_TIMEOUT_SECONDS",
    "DEFAULT_OPEN_TIMEOUT_SECONDS",
    "DEFAULT_PROVIDER",
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_EMBEDDING_MODEL",
    "CLAUDE_DEFAULT_BASE_URL",
    "CLAUDE_DEFAULT_MODEL",
    "CLAUDE_DEFAULT_MAX_TOKENS",
    "CLAUDE_API_VERSION",
    "CLAUDE_SCHEMA_TOOL_NAME",
    "CLAUDE_SCHEMA_TOOL_DESCRIPTION",
    "GEMINI_DEFAULT_BASE_URL",
    "GEMINI_DEFAULT_MODEL",
    "GEMINI_DEFAULT_EMBEDDING_MODEL",
    "OPENROUTER_DEFAULT_BASE_URL",
    "OPENROUTER_DEFAULT_MODEL",
    "OPENROUTER_DEFAULT_EMBEDDING_MODEL",
    "OLLAMA_DEFAULT_MODEL",
    "OLLAMA_DEFAULT_EMBEDDING_MODEL",
    "OLLAMA_CHAT_PATH",
    "OLLAMA_EMBEDDINGS_PATH",
    "OLLAMA_EMBEDDINGS_PARAM",
]
