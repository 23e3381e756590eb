# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from streamramp.controller.models import IterationRecord


@runtime_checkable
class AlertSinkProtocol(Protocol):
    """Receives human-readable progress and failure notifications.

    Delivery is fire-and-forget: implementations log their own delivery
    failures and never raise into the caller.
    """

    async def notify(self, stage: str, record: IterationRecord) -> None: ...

    async def send_message(self, message: str) -> None: ...

    async def send_fatal(self, message: str) -> None: ...

    async def close(self) -> None: ...
