from __future__ import annotations

import concurrent.futures
import threading
import time

import httpx

from .config_types import ClientConfig
from .errors import HttpError, NetworkError, RequestTimeout

CONTENT_TYPE = "text/xml"


class Transport:
    """Single-shot POST of an XML-RPC body.

    A fresh ``httpx.Client`` is opened for each call so concurrent callers
    never share connection state. ``cfg.timeout`` is a hard bound on the
    whole exchange, body download included; ``0`` means no limit.

    httpx only limits each connect, write or read on its own, so a bounded
    call runs the exchange on a worker thread and stops waiting for it at
    the deadline. The abandoned exchange is told to stop, and its own
    httpx timeouts never exceed the time that was left when it started.
    """

    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": self._cfg.user_agent, "Content-Type": CONTENT_TYPE}

    def post(self, payload: bytes) -> bytes:
        timeout_s = self._cfg.timeout
        if not timeout_s:
            return self._exchange(payload, None, threading.Event())

        deadline = time.monotonic() + timeout_s
        cancelled = threading.Event()
        pool = concurrent.futures.ThreadPoolExecutor(max_workers=1, thread_name_prefix="jabber-rpc")
        try:
            future = pool.submit(self._exchange, payload, deadline, cancelled)
            try:
                return future.result(timeout=timeout_s)
            except concurrent.futures.TimeoutError:
                cancelled.set()
                raise RequestTimeout(f"POST {self._cfg.server} exceeded {timeout_s}s") from None
        finally:
            pool.shutdown(wait=False)

    def _exchange(self, payload: bytes, deadline: float | None, cancelled: threading.Event) -> bytes:
        url = self._cfg.server
        limit = self._cfg.timeout

        def remaining() -> float | None:
            if deadline is None:
                return None
            left = deadline - time.monotonic()
            if left <= 0 or cancelled.is_set():
                raise RequestTimeout(f"POST {url} exceeded {limit}s")
            return left

        try:
            with httpx.Client(
                timeout=remaining(),
                headers=self._headers(),
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                with client.stream("POST", url, content=payload) as r:
                    if r.status_code >= 400:
                        r.read()
                        raise HttpError(
                            r.status_code,
                            f"POST {url} failed with {r.status_code}",
                            r.text[:1000] or None,
                        )
                    remaining()
                    chunks = []
                    for chunk in r.iter_bytes():
                        chunks.append(chunk)
                        remaining()
        except httpx.TimeoutException as e:
            raise RequestTimeout(f"POST {url} exceeded {limit}s: {e}") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise NetworkError(str(e)) from e

        return b"".join(chunks)
