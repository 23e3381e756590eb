# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Minimal asyncio HTTP server reporting the state of a ramp run.

Routes:
    GET  /         Running / not running / result of the last run
    GET  /healthz  Liveness probe
    POST /stop     Ask the stream tester to stop its current batch

Configuration via environment variables:
    STREAMRAMP_STATUS_REQUEST_TIMEOUT=5.0  # Request read timeout
"""

from __future__ import annotations

import asyncio
import contextlib
from asyncio import StreamReader, StreamWriter
from typing import TYPE_CHECKING, Any, Protocol

from streamramp.common.environment import Environment
from streamramp.common.exceptions import StreamTesterError
from streamramp.common.logging import LoggerMixin

if TYPE_CHECKING:
    from streamramp.tester.protocols import StreamTesterProtocol

__all__ = [
    "RunStatusProtocol",
    "StatusServer",
]

MSG_RUNNING = "Benchmark is currently running.\n"
MSG_NOT_RUNNING = "Benchmark is not running.\n"
MSG_NO_RESULT = "Benchmark is not running. No result is available.\n"

# Upper bound on header lines read before a request is answered
_MAX_HEADER_LINES = 100


def _make_response(
    status_code: int, status_text: str, body: str | None = None
) -> bytes:
    """Render an HTTP response as bytes."""
    payload = (body if body is not None else status_text).encode()
    head = (
        f"HTTP/1.1 {status_code} {status_text}\r\n"
        f"Content-Type: text/plain; charset=utf-8\r\n"
        f"Content-Length: {len(payload)}\r\n"
        f"Connection: close\r\n"
        f"\r\n"
    ).encode()
    return head + payload


# Pre-computed responses (avoid string formatting on every request)
_RESP_OK = _make_response(200, "OK", "ok")
_RESP_RUNNING = _make_response(200, "OK", MSG_RUNNING)
_RESP_NOT_RUNNING = _make_response(200, "OK", MSG_NOT_RUNNING)
_RESP_NO_RESULT = _make_response(200, "OK", MSG_NO_RESULT)
_RESP_STOP_REQUESTED = _make_response(200, "OK", "stop requested\n")
_RESP_NOT_FOUND = _make_response(404, "Not Found")
_RESP_BAD_REQUEST = _make_response(400, "Bad Request")
_RESP_METHOD_NOT_ALLOWED = _make_response(405, "Method Not Allowed")
_RESP_NO_TESTER = _make_response(503, "Service Unavailable", "no stream tester\n")


class RunStatusProtocol(Protocol):
    """Read-only view of a ramp run."""

    def is_running(self) -> bool: ...

    def get_manifest_id(self) -> str: ...


class StatusServer(LoggerMixin):
    """Serves the state of a ramp run over plain HTTP.

    The server only reads the controller through RunStatusProtocol. The result
    text is pushed in with publish_result() once the run completes.
    """

    def __init__(
        self,
        status: RunStatusProtocol,
        host: str,
        port: int,
        client: StreamTesterProtocol | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize StatusServer.

        Args:
            status: Run state to report
            host: Interface to bind
            port: Port to bind (0 picks a free port, see bound_port)
            client: Stream tester client used by POST /stop
        """
        super().__init__(**kwargs)
        self._status = status
        self._client = client
        self.host = host
        self.port = port
        self._server: asyncio.Server | None = None
        self._result_text: str | None = None

    @property
    def is_serving(self) -> bool:
        return self._server is not None

    @property
    def bound_port(self) -> int | None:
        """Port actually bound, or None when not serving."""
        if self._server is None or not self._server.sockets:
            return None
        return self._server.sockets[0].getsockname()[1]

    def publish_result(self, text: str) -> None:
        """Make the result of a completed run available on GET /."""
        self._result_text = text

    async def start(self) -> None:
        if self._server is not None:
            self.debug("Status server already running. Ignoring start request.")
            return

        try:
            self._server = await asyncio.start_server(
                self._handle_request, host=self.host, port=self.port
            )
        except OSError as e:
            self.error(
                f"Status server failed to bind to {self.host}:{self.port}: {e!r}. "
                "Use --http-port 0 to disable the status server."
            )
            raise
        self.info(f"Status server started on {self.host}:{self.bound_port}")

    async def stop(self) -> None:
        if self._server is None:
            self.debug("Status server is not running. Ignoring stop request.")
            return

        server = self._server
        self._server = None
        server.close()
        await server.wait_closed()
        self.debug("Status server stopped.")

    def render_status(self) -> bytes:
        if self._status.is_running():
            return _RESP_RUNNING
        if not self._status.get_manifest_id():
            return _RESP_NOT_RUNNING
        if self._result_text is None:
            return _RESP_NO_RESULT
        return _make_response(200, "OK", self._result_text)

    async def request_stop(self) -> bytes:
        """Ask the stream tester to stop. Failures are reported, not raised."""
        if self._client is None:
            return _RESP_NO_TESTER
        try:
            await self._client.stop()
        except StreamTesterError as e:
            self.warning(f"Stream tester stop failed: {e}")
            return _make_response(502, "Bad Gateway", f"stop failed: {e}\n")
        return _RESP_STOP_REQUESTED

    async def _handle_request(self, reader: StreamReader, writer: StreamWriter) -> None:
        try:
            timeout = Environment.STATUS.REQUEST_TIMEOUT
            request_line = await asyncio.wait_for(reader.readline(), timeout=timeout)
            if not request_line:
                return

            # Example: "GET / HTTP/1.1\r\n"
            parts = request_line.split(maxsplit=2)
            if len(parts) < 2:
                writer.write(_RESP_BAD_REQUEST)
                await writer.drain()
                return

            await asyncio.wait_for(self._skip_headers(reader), timeout=timeout)

            method, path = parts[0], parts[1].split(b"?", 1)[0]

            if path == b"/":
                response = (
                    self.render_status() if method == b"GET" else _RESP_METHOD_NOT_ALLOWED
                )
            elif path == b"/healthz":
                response = _RESP_OK if method == b"GET" else _RESP_METHOD_NOT_ALLOWED
            elif path == b"/stop":
                response = (
                    await self.request_stop()
                    if method == b"POST"
                    else _RESP_METHOD_NOT_ALLOWED
                )
            else:
                response = _RESP_NOT_FOUND

            writer.write(response)
            await writer.drain()

        except TimeoutError:
            self.warning("Status request timed out")
        except (ConnectionError, asyncio.IncompleteReadError) as e:
            self.debug(f"Status client went away: {e!r}")
        finally:
            writer.close()
            with contextlib.suppress(ConnectionError):
                await writer.wait_closed()

    @staticmethod
    async def _skip_headers(reader: StreamReader) -> None:
        for _ in range(_MAX_HEADER_LINES):
            line = await reader.readline()
            if line in (b"\r\n", b"\n", b""):
                return
