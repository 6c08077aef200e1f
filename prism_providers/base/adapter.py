"""Adapter base classes shared by every provider.

Purpose
-------
``BaseCompletions.create`` and ``BaseEmbeddings.create`` fix the order of
operations for all providers; subclasses supply only the provider-specific
pieces (settings check, URL, headers, body, normalization).

Completion order:
    1. resolve settings; missing credentials/host raise ``ConfigurationError``
    2. validate messages (``ValidationError``)
    3. split transport controls from pass-through parameters
    4. build the provider body
    5. one POST via :func:`post_json`
    6. decode (``TransportError`` / ``ParseError``)
    7. normalize into :class:`CompletionResponse`

No step runs before the previous one succeeded, so configuration and
validation failures never reach the network.

Settings
--------
Adapters read their settings block from the installed process
configuration (:func:`prism_providers.config.get_config`) at call time
unless an explicit settings object was passed to the constructor.

Logging
-------
``completion.start`` / ``completion.end`` / ``completion.error`` and the
``embedding.*`` equivalents, via :func:`normalized_log_event`.
"""

from __future__ import annotations

import time
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Union

from ..config import get_config
from ..config.settings import OllamaSettings, ProviderSettings
from .dto.call_options import CallOptions, split_call_options
from .dto.chat import validate_messages, validate_text
from .errors import APIKeyNotConfiguredError, ProviderError
from .http.transport import decode_json_response, post_json
from .log_support import LogContext
from .logging import get_logger, normalized_log_event
from .models import CompletionRequest, CompletionResponse

Settings = Union[ProviderSettings, OllamaSettings]


class _AdapterBase:
    provider_name: ClassVar[str] = ""
    default_model: ClassVar[str] = ""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._explicit_settings = settings
        self._logger = get_logger(f"prism.{self.provider_name}")

    @property
    def settings(self) -> Settings:
        if self._explicit_settings is not None:
            return self._explicit_settings
        return get_config().for_provider(self.provider_name)

    def _require_settings(self, settings: Settings, model: str) -> None:
        """Raise ``ConfigurationError`` when a required field is missing."""
        if not settings.api_key:
            raise APIKeyNotConfiguredError(self.provider_name, model=model)

    def _headers(self, settings: Settings) -> Dict[str, str]:
        return {"Authorization": f"Bearer {settings.api_key}"}

    def _post(self, url: str, settings: Settings, body: Mapping[str, Any], model: str, options: CallOptions) -> Any:
        result = post_json(
            url,
            headers=self._headers(settings),
            body=body,
            provider=self.provider_name,
            model=model,
            read_timeout=options.read_timeout,
            open_timeout=options.open_timeout,
        )
        return decode_json_response(result, provider=self.provider_name, model=model)


class BaseCompletions(_AdapterBase):
    """Template for ``Completions.create``; subclasses implement the hooks."""

    def create(
        self,
        messages: Any,
        *,
        model: Optional[str] = None,
        json_schema: Optional[Dict[str, Any]] = None,
        tools: Optional[List[Dict[str, Any]]] = None,
        tool_choice: Optional[Any] = None,
        max_tokens: Optional[int] = None,
        **extra: Any,
    ) -> CompletionResponse:
        """Run one chat completion and return the normalized response.

        Parameters
        ----------
        messages:
            Non-empty list of ``{"role", "content"}`` mappings or ``Message``.
        model:
            Provider model id; the adapter default when omitted.
        json_schema:
            Optional ``{name, schema, strict?}`` requesting structured output.
        tools, tool_choice:
            Provider-native tool definitions and an optional explicit choice.
        max_tokens:
            Optional generation cap.
        **extra:
            ``read_timeout``, ``open_timeout`` and ``path`` steer the call;
            everything else is forwarded into the request body.

        Raises
        ------
        ConfigurationError, ValidationError, TransportError, NetworkError,
        ParseError, RefusalError, IncompleteResponseError,
        ContentFilteredError, UnexpectedStateError
        """
        resolved_model = model or self.default_model
        ctx = LogContext(provider=self.provider_name, model=resolved_model, operation="completion")
        t0 = time.perf_counter()
        try:
            settings = self.settings
            self._require_settings(settings, resolved_model)
            validated = validate_messages(messages, self.provider_name, resolved_model)
            options, passthrough = split_call_options(extra, self.provider_name, resolved_model)
            request = CompletionRequest(
                model=resolved_model,
                messages=validated,
                json_schema=json_schema,
                tools=tools,
                tool_choice=tool_choice,
                max_tokens=max_tokens,
                extra=passthrough,
            )
            self._validate_request(request)
            body = self._build_body(request)
            normalized_log_event(
                self._logger,
                "completion.start",
                ctx,
                phase="start",
                structured=request.is_structured,
                tools=len(tools) if tools else None,
            )
            payload = self._post(self._completions_url(settings, options), settings, body, resolved_model, options)
            response = self._normalize(payload, request)
        except ProviderError as exc:
            normalized_log_event(
                self._logger,
                "completion.error",
                ctx,
                phase="finalize",
                error_code=exc.code.value,
                latency_ms=(time.perf_counter() - t0) * 1000.0,
                error=exc.message,
            )
            raise
        normalized_log_event(
            self._logger,
            "completion.end",
            ctx,
            phase="finalize",
            latency_ms=(time.perf_counter() - t0) * 1000.0,
            tool_calls=len(response.tool_calls) if response.tool_calls else None,
        )
        return response

    # ---- hooks ----

    def _validate_request(self, request: CompletionRequest) -> None:
        """Provider-specific request checks beyond the shared message policy."""

    def _completions_url(self, settings: Settings, options: CallOptions) -> str:
        raise NotImplementedError

    def _build_body(self, request: CompletionRequest) -> Dict[str, Any]:
        raise NotImplementedError

    def _normalize(self, payload: Any, request: CompletionRequest) -> CompletionResponse:
        raise NotImplementedError


class BaseEmbeddings(_AdapterBase):
    """Template for ``Embeddings.create``."""

    def create(self, text: Any, *, model: Optional[str] = None, **extra: Any) -> List[float]:
        """Return the embedding vector for ``text``.

        ``read_timeout`` / ``open_timeout`` (and for Ollama ``path`` /
        ``param_name``) steer the call; other keyword arguments are forwarded.
        """
        resolved_model = model or self.default_model
        ctx = LogContext(provider=self.provider_name, model=resolved_model, operation="embedding")
        t0 = time.perf_counter()
        try:
            settings = self.settings
            self._require_settings(settings, resolved_model)
            validated = validate_text(text, self.provider_name, resolved_model)
            options, passthrough = split_call_options(extra, self.provider_name, resolved_model)
            body = self._build_body(validated, resolved_model, passthrough, options)
            normalized_log_event(self._logger, "embedding.start", ctx, phase="start", chars=len(validated))
            payload = self._post(self._embeddings_url(settings, options), settings, body, resolved_model, options)
            vector = self._extract(payload, resolved_model)
        except ProviderError as exc:
            normalized_log_event(
                self._logger,
                "embedding.error",
                ctx,
                phase="finalize",
                error_code=exc.code.value,
                latency_ms=(time.perf_counter() - t0) * 1000.0,
                error=exc.message,
            )
            raise
        normalized_log_event(
            self._logger,
            "embedding.end",
            ctx,
            phase="finalize",
            latency_ms=(time.perf_counter() - t0) * 1000.0,
            dimensions=len(vector),
        )
        return vector

    def _embeddings_url(self, settings: Settings, options: CallOptions) -> str:
        raise NotImplementedError

    def _build_body(self, text: str, model: str, passthrough: Dict[str, Any], options: CallOptions) -> Dict[str, Any]:
        body: Dict[str, Any] = {"model": model, "input": text}
        body.update({k: v for k, v in passthrough.items() if k not in body})
        return body

    def _extract(self, payload: Any, model: str) -> List[float]:
        raise NotImplementedError


__all__ = ["BaseCompletions", "BaseEmbeddings", "Settings"]
