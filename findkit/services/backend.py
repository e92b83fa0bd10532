"""Request/response channel to the document's search engine."""

from __future__ import annotations

import asyncio
import threading
from typing import Any, Callable, Mapping, Protocol

import httpx

from findkit.config import BackendSettings
from findkit.domain.models import FindOperation, SearchRequest
from findkit.logging import logger
from findkit.services.exceptions import BackendLinkError, MalformedReply, ServiceError
from findkit.utils.retry import retry_async

ReplyCallback = Callable[[Any], None]

# Raised before the request reached the engine, so any operation may be resent.
CONNECT_ERRORS: tuple[type[httpx.HTTPError], ...] = (httpx.ConnectError, httpx.ConnectTimeout)


class BackendLink(Protocol):
    def send(
        self,
        operation: str,
        params: Mapping[str, Any],
        on_reply: ReplyCallback | None = None,
    ) -> None:
        """Queue ``operation`` without blocking.

        ``on_reply`` runs at most once, on whatever thread the transport
        finishes on. Nothing is delivered when the transport fails.
        """
        ...


def single_shot(callback: ReplyCallback) -> ReplyCallback:
    """Wrap ``callback`` so only its first invocation goes through."""

    lock = threading.Lock()
    fired = False

    def _once(value: Any) -> None:
        nonlocal fired
        with lock:
            if fired:
                logger.warning(
                    "backend_reply_duplicate",
                    callback=getattr(callback, "__qualname__", repr(callback)),
                )
                return
            fired = True
        callback(value)

    return _once


class HttpBackendLink:
    """BackendLink that POSTs JSON envelopes to the engine's RPC endpoint.

    Every send becomes a task on the running loop, so ``send`` must be called
    from the loop that owns the link. Replies are read from ``{"result": ...}``.
    ``find`` is retried on any HTTP error; ``find_next`` and ``find_previous``
    only when the connection could not be made.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        settings: BackendSettings | None = None,
        *,
        view_id: str | None = None,
        owns_client: bool = False,
    ) -> None:
        self._client = client
        self._settings = settings or BackendSettings()
        self._view_id = view_id if view_id is not None else self._settings.view_id
        self._owns_client = owns_client
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def send(
        self,
        operation: str,
        params: Mapping[str, Any],
        on_reply: ReplyCallback | None = None,
    ) -> None:
        request = SearchRequest(
            operation=FindOperation(operation),
            params=dict(params),
            view_id=self._view_id,
        )
        callback = single_shot(on_reply) if on_reply is not None else None
        task = asyncio.get_running_loop().create_task(self._deliver(request, callback))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        logger.debug(
            "backend_request_sent",
            operation=request.operation.value,
            params=request.params,
            expects_reply=callback is not None,
        )

    async def drain(self) -> None:
        """Wait for every in-flight send to settle."""

        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def aclose(self) -> None:
        await self.drain()
        if self._owns_client:
            await self._client.aclose()

    async def _deliver(self, request: SearchRequest, callback: ReplyCallback | None) -> None:
        try:
            response = await self._post(request)
            if callback is None:
                return
            result = self._read_result(response)
        except MalformedReply as exc:
            logger.warning(
                "backend_reply_malformed",
                operation=request.operation.value,
                error=str(exc),
            )
            return
        except ServiceError as exc:
            logger.warning(
                "backend_request_failed",
                operation=request.operation.value,
                error=str(exc),
            )
            return
        try:
            callback(result)
        except Exception:
            logger.exception(
                "backend_reply_callback_failed",
                operation=request.operation.value,
            )

    async def _post(self, request: SearchRequest) -> httpx.Response:
        payload = request.to_payload()

        async def _request() -> httpx.Response:
            response = await self._client.post(
                str(self._settings.url),
                json=payload,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
            return response

        try:
            return await retry_async(
                _request,
                max_attempts=self._settings.max_attempts,
                base_delay=self._settings.retry_base_delay,
                retry_on=self._retryable_errors(request.operation),
                logger=logger,
                operation_name=f"backend_{request.operation.value}",
            )
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text[:200] if exc.response is not None else str(exc)
            status_code = exc.response.status_code if exc.response is not None else "unknown"
            raise BackendLinkError(
                f"{request.operation.value} failed ({status_code}): {detail}"
            ) from exc
        except httpx.HTTPError as exc:
            raise BackendLinkError(f"{request.operation.value} failed: {exc}") from exc

    @staticmethod
    def _retryable_errors(operation: FindOperation) -> tuple[type[httpx.HTTPError], ...]:
        # Navigation is only resent when the engine never received it.
        if operation is FindOperation.FIND:
            return (httpx.HTTPError,)
        return CONNECT_ERRORS

    @staticmethod
    def _read_result(response: httpx.Response) -> Any:
        try:
            body = response.json()
        except ValueError as exc:
            raise MalformedReply("reply body is not JSON") from exc
        if not isinstance(body, dict) or "result" not in body:
            raise MalformedReply("reply body has no result")
        return body["result"]


__all__ = [
    "BackendLink",
    "CONNECT_ERRORS",
    "HttpBackendLink",
    "ReplyCallback",
    "single_shot",
]
