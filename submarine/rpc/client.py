"""A JSON-RPC client over a websocket with concurrent requests."""

from __future__ import annotations

import itertools
import json
import logging
import threading
from concurrent.futures import Future, InvalidStateError
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

import websocket

log = logging.getLogger(__name__)

T = TypeVar("T")

_CLOSED_MESSAGE = "request failed or connection closed"


class RpcError(Exception):
    """An error object returned by the node in place of a result."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message


class PendingRequest:
    """A request that was sent and whose response may not have arrived yet."""

    def __init__(self, future: Optional[Future] = None) -> None:
        self.future: Future = future if future is not None else Future()

    def result(self, timeout: Optional[float] = None) -> Any:
        """Wait for the response and return its decoded ``result`` value."""
        return self.future.result(timeout)

    def raw_message(self, timeout: Optional[float] = None) -> str:
        """Wait for the response and return its ``result`` as JSON text."""
        return json.dumps(self.result(timeout))

    def as_string(self, timeout: Optional[float] = None) -> str:
        """Wait for the response and return its result, which must be a string."""
        value = self.result(timeout)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ValueError(f"expected a string result, got {type(value).__name__}")
        return value


def _settle(future: Future, *, result: Any = None, error: Optional[BaseException] = None) -> None:
    try:
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(result)
    except InvalidStateError:
        pass


class RpcClient:
    """Sends JSON-RPC requests and matches responses to them by id.

    ``connection`` needs ``send(text)``, ``recv()`` and ``close()``; a
    background thread reads responses until the connection fails or closes.
    """

    def __init__(self, connection: Any) -> None:
        self._conn = connection
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self._pending: Dict[int, Future] = {}
        self._closed = threading.Event()
        self._reader = threading.Thread(
            target=self._read_loop, name="rpc-reader", daemon=True
        )
        self._reader.start()

    @classmethod
    def connect(cls, url: str) -> "RpcClient":
        """Open a websocket to ``url`` and return a client using it."""
        return cls(websocket.create_connection(url))

    def __enter__(self) -> "RpcClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _read_loop(self) -> None:
        while not self._closed.is_set():
            try:
                raw = self._conn.recv()
            except Exception as exc:
                if not self._closed.is_set():
                    log.warning("read error: %s", exc)
                self._fail_pending()
                return
            try:
                message = json.loads(raw)
            except (TypeError, ValueError) as exc:
                log.warning("unmarshal error: %s", exc)
                continue
            if isinstance(message, dict):
                self._dispatch(message)
            else:
                log.warning("unmarshal error: response is not an object")

    def _dispatch(self, message: Dict[str, Any]) -> None:
        request_id = message.get("id")
        error = message.get("error")
        if error is not None:
            log.warning("RPC Error: %s", (error or {}).get("message", ""))
        if not isinstance(request_id, int):
            return
        with self._lock:
            future = self._pending.pop(request_id, None)
        if future is None:
            return
        if error is not None:
            _settle(
                future,
                error=RpcError(int(error.get("code", 0)), str(error.get("message", ""))),
            )
        elif "result" in message:
            _settle(future, result=message["result"])
        else:
            _settle(future, error=ValueError("response holds no result"))

    def _fail_pending(self) -> None:
        with self._lock:
            futures = list(self._pending.values())
            self._pending.clear()
        for future in futures:
            _settle(future, error=ConnectionError(_CLOSED_MESSAGE))

    def send(self, method: str, params: Sequence[Any] = ()) -> PendingRequest:
        """Send a request and return a handle to its coming response."""
        future: Future = Future()
        with self._lock:
            request_id = next(self._ids)
            payload = json.dumps(
                {
                    "id": request_id,
                    "jsonrpc": "2.0",
                    "method": method,
                    "params": list(params),
                }
            )
            self._pending[request_id] = future
            try:
                self._conn.send(payload)
            except Exception as exc:
                log.warning("write error: %s", exc)
                del self._pending[request_id]
                _settle(future, error=ConnectionError(_CLOSED_MESSAGE))
        return PendingRequest(future)

    def send_many(
        self,
        method: str,
        params_list: Iterable[Sequence[Any]],
        fun: Callable[[PendingRequest], T],
    ) -> List[T]:
        """Send all requests first, then turn each response into a value with ``fun``."""
        requests = [self.send(method, params) for params in params_list]
        results: List[T] = []
        for index, request in enumerate(requests):
            try:
                results.append(fun(request))
            except Exception as exc:
                raise RuntimeError(f"send_many[{index}]: {exc}") from exc
        return results

    def close(self) -> None:
        """Close the connection and fail every request still waiting."""
        self._closed.set()
        try:
            self._conn.close()
        except Exception as exc:
            log.warning("close error: %s", exc)
        self._fail_pending()