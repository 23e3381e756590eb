# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""HTTP client for the stream tester service.

The stream tester exposes three endpoints:
    POST /start_streams   start a batch of concurrent streams
    GET  /stats           stats snapshot for a batch (by base manifest id)
    GET  /stop            tear down whatever the tester is currently running

The client keeps no state besides the base manifest id of the most recently
started batch. Every failure surfaces as StreamTesterError; nothing is retried.
"""

from __future__ import annotations

from typing import Any, TypeVar
from urllib.parse import quote

import aiohttp
import orjson
from pydantic import BaseModel, ValidationError

from streamramp.common.config import StreamTesterConfig, StreamTesterDefaults
from streamramp.common.exceptions import StreamTesterError
from streamramp.common.logging import LoggerMixin
from streamramp.tester.models import StartStreamsRequest, StartStreamsResponse, Stats

__all__ = ["StreamTesterClient"]

ModelT = TypeVar("ModelT", bound=BaseModel)

_JSON_HEADERS = {"Content-Type": "application/json"}


class StreamTesterClient(LoggerMixin):
    """Async client for the stream tester start/stats/stop API.

    Usage:
        async with StreamTesterClient(config.tester) as client:
            response = await client.start_streams(num_streams=10, num_profiles=2)
            stats = await client.stats()
    """

    def __init__(
        self,
        tester_config: StreamTesterConfig,
        session: aiohttp.ClientSession | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize StreamTesterClient.

        Args:
            tester_config: Stream tester and broadcaster addresses
            session: Session to issue requests on. When omitted, the client
                creates one lazily and closes it in close().
        """
        super().__init__(**kwargs)
        self.config = tester_config
        self._session = session
        self._owns_session = session is None
        self._base_manifest_id = ""

    @property
    def base_url(self) -> str:
        return f"http://{self.config.host}:{self.config.port}"

    @property
    def base_manifest_id(self) -> str:
        """Base manifest id of the most recently started batch, or ""."""
        return self._base_manifest_id

    async def __aenter__(self) -> StreamTesterClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
        if self._owns_session:
            self._session = None

    async def start_streams(
        self, num_streams: int, num_profiles: int
    ) -> StartStreamsResponse:
        """Ask the tester to start a batch of concurrent streams.

        The remembered base manifest id is replaced with the one in the
        response, whether or not the tester reports success. Callers must check
        ``success`` themselves.

        Args:
            num_streams: Number of simultaneous streams
            num_profiles: Number of transcoding profiles per stream

        Returns:
            Decoded response carrying the success flag and base manifest id

        Raises:
            StreamTesterError: On transport, HTTP status or decode failure
        """
        request = StartStreamsRequest(
            host=self.config.rtmp_host,
            media_host=self.config.media_host,
            file_name=StreamTesterDefaults.FILE_NAME,
            rtmp=self.config.rtmp_port,
            media=self.config.media_port,
            repeat=1,
            simultaneous=num_streams,
            profiles_num=num_profiles,
            measure_latency=False,
            http_ingest=False,
        )
        body = await self._request(
            "start_streams",
            "POST",
            f"{self.base_url}/start_streams",
            data=orjson.dumps(request.model_dump()),
            headers=_JSON_HEADERS,
        )
        response = self._decode("start_streams", body, StartStreamsResponse)
        self._base_manifest_id = response.base_manifest_id
        self.debug(f"start_streams: {body.decode(errors='replace')}")
        return response

    async def stats(self, base_manifest_id: str | None = None) -> Stats:
        """Fetch a stats snapshot, including latencies, for a batch.

        Args:
            base_manifest_id: Batch to query. Defaults to the most recently
                started batch.

        Raises:
            StreamTesterError: On transport, HTTP status or decode failure
        """
        manifest_id = (
            self._base_manifest_id if base_manifest_id is None else base_manifest_id
        )
        url = (
            f"{self.base_url}/stats?latencies"
            f"&base_manifest_id={quote(manifest_id, safe='')}"
        )
        body = await self._request("stats", "GET", url)
        stats = self._decode("stats", body, Stats)
        self.debug(f"stats: {body.decode(errors='replace')}")
        return stats

    async def stop(self) -> None:
        """Ask the tester to stop whatever it is currently running.

        Raises:
            StreamTesterError: On transport or HTTP status failure
        """
        await self._request("stop", "GET", f"{self.base_url}/stop")
        self.info("Requested stream tester stop")

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self.config.request_timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def _request(
        self, operation: str, method: str, url: str, **kwargs: Any
    ) -> bytes:
        """Issue a request and return the raw body of a 2xx response."""
        session = await self._get_session()
        try:
            async with session.request(method, url, **kwargs) as response:
                body = await response.read()
                status = response.status
        except (aiohttp.ClientError, TimeoutError) as e:
            self.error(f"{operation}() failed: {e!r}")
            raise StreamTesterError(
                f"{operation} request to {url} failed: {e!r}", operation=operation
            ) from e

        if not 200 <= status < 300:
            snippet = body[:200].decode(errors="replace")
            self.error(f"{operation}() returned HTTP {status}: {snippet}")
            raise StreamTesterError(
                f"{operation} request to {url} returned HTTP {status}: {snippet}",
                operation=operation,
                status=status,
            )
        return body

    def _decode(self, operation: str, body: bytes, model: type[ModelT]) -> ModelT:
        try:
            return model.model_validate(orjson.loads(body))
        except (orjson.JSONDecodeError, ValidationError) as e:
            self.error(f"Decoding {operation} response failed: {e}")
            raise StreamTesterError(
                f"invalid {operation} response: {e}", operation=operation
            ) from e
