"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import Any
from urllib.parse import urlencode

from pydantic import TypeAdapter, ValidationError

from ...models.envelope import ApiResponse
from .transport import RESTTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], Any] | None = None
    # Type of the envelope's ``data`` field
    result_type: Any = Any
    authenticated: bool = True


@lru_cache(maxsize=None)
def _envelope_adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(ApiResponse[result_type])


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class EnvelopeAdapter(ResponseAdapter):
    """Parse an envelope dict into ``ApiResponse[result_type]``.

    Typed parsing is best-effort. When ``data`` does not fit
    ``result_type`` the envelope keeps the backend's ``success`` and
    ``error`` and carries the raw ``data`` untouched.
    """

    def __init__(self, spec: RestEndpointSpec) -> None:
        self._spec = spec
        self._type_adapter = _envelope_adapter(spec.result_type)

    def parse(self, response: Any, params: dict[str, Any]) -> ApiResponse[Any]:
        try:
            return self._type_adapter.validate_python(response)
        except ValidationError as e:
            logger.warning(
                "Response payload did not match the expected type; returning raw data",
                extra={"endpoint": self._spec.id, "errors": e.error_count()},
            )
            return ApiResponse.model_construct(
                success=response["success"],
                data=response.get("data"),
                error=response.get("error"),
            )


def build_path_with_query(path: str, query: dict[str, Any] | None) -> str:
    """Append a form-encoded query string, keeping the dict's key order."""
    if not query:
        return path
    return f"{path}?{urlencode(query)}"


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        params: dict[str, Any] | None = None,
        adapter: ResponseAdapter | None = None,
    ) -> Any:
        params = params or {}
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        body = spec.build_body(params) if spec.build_body else None

        data = await self._t.request(
            spec.method.upper(),
            build_path_with_query(path, query),
            body,
            authenticated=spec.authenticated,
        )
        return (adapter or EnvelopeAdapter(spec)).parse(data, params)
