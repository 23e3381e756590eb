# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from streamramp.tester.models import StartStreamsResponse, Stats


@runtime_checkable
class StreamTesterProtocol(Protocol):
    """Start/poll/stop surface of the stream tester that the ramp depends on."""

    @property
    def base_manifest_id(self) -> str: ...

    async def start_streams(
        self, num_streams: int, num_profiles: int
    ) -> StartStreamsResponse: ...

    async def stats(self, base_manifest_id: str | None = None) -> Stats: ...

    async def stop(self) -> None: ...
