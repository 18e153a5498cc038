"""Cursor API repository - one schema-validated HTTP call per request."""

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from mcp_cursor.errors import (
    DecodeError,
    ResponseValidationError,
    TransportError,
    UpstreamError,
)
from mcp_cursor.schemas import ErrorResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

_error_adapter = TypeAdapter(ErrorResponse)


class CursorApiRepo:
    """Issues authenticated requests to the Cursor API and validates responses."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.cursor.com",
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._client = client or httpx.AsyncClient(follow_redirects=True)

    async def aclose(self) -> None:
        await self._client.aclose()

    def _headers(self, has_body: bool) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self._api_key}"}
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def request(
        self,
        endpoint: str,
        response_schema: type[T],
        method: str = "GET",
        body: BaseModel | dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> T:
        """
        Perform one request and return the body validated against response_schema.

        Raises:
            DecodeError: body is not JSON (any status)
            UpstreamError: non-2xx with an {"error": {...}} body
            TransportError: non-2xx without an error body, or the exchange failed
            ResponseValidationError: 2xx body does not match response_schema
        """
        url = f"{self.base_url}{endpoint}"
        content = None
        if body is not None:
            payload = (
                body.model_dump(mode="json", by_alias=True, exclude_none=True)
                if isinstance(body, BaseModel)
                else body
            )
            content = json.dumps(payload)

        logger.debug(f"{method} {url}")
        try:
            response = await self._client.request(
                method,
                url,
                headers=self._headers(body is not None),
                content=content,
                params=params,
            )
        except httpx.RequestError as e:
            logger.warning(f"Cursor API request failed: {method} {url} - {e}")
            raise TransportError(None, str(e) or type(e).__name__, "") from e

        text = response.text
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(text) from e

        if not response.is_success:
            try:
                error = _error_adapter.validate_python(data)
            except ValidationError:
                raise TransportError(
                    response.status_code, response.reason_phrase, text
                ) from None
            raise UpstreamError(
                response.status_code, error.error.message, error.error.code
            )

        try:
            # Strict: a 2xx body is never coerced into the expected types
            return TypeAdapter(response_schema).validate_json(text, strict=True)
        except ValidationError as e:
            logger.warning(f"Response validation failed for {method} {endpoint}: {e}")
            raise ResponseValidationError(
                str(e), e.errors(include_url=False, include_context=False)
            ) from e
