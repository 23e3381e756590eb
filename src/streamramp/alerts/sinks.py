# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Alert sinks for ramp progress, results and failures."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import aiohttp
import orjson

from streamramp.common.environment import Environment
from streamramp.common.exceptions import AlertDeliveryError
from streamramp.common.logging import LoggerMixin

if TYPE_CHECKING:
    from streamramp.alerts.protocols import AlertSinkProtocol
    from streamramp.common.config import UserConfig
    from streamramp.controller.models import IterationRecord

__all__ = [
    "BaseAlertSink",
    "CompositeAlertSink",
    "DiscordAlertSink",
    "LoggingAlertSink",
    "build_alert_sink",
]


class BaseAlertSink(LoggerMixin, ABC):
    """Formats progress events into text and hands them to send_message().

    Attributes:
        target: Description of the system under test, included in every
            progress message
        num_profiles: Transcoding profiles requested per stream
    """

    def __init__(self, target: str, num_profiles: int, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.target = target
        self.num_profiles = num_profiles

    def format_progress(self, stage: str, record: IterationRecord) -> str:
        return (
            f"{stage}{self.target} - now testing {record.num_streams} "
            f"concurrent streams with {self.num_profiles} profiles"
        )

    async def notify(self, stage: str, record: IterationRecord) -> None:
        await self.send_message(self.format_progress(stage, record))

    @abstractmethod
    async def send_message(self, message: str) -> None:
        pass

    async def send_fatal(self, message: str) -> None:
        await self.send_message(message)

    async def close(self) -> None:  # noqa: B027
        pass


class LoggingAlertSink(BaseAlertSink):
    """Writes alerts to the log."""

    async def send_message(self, message: str) -> None:
        self.info(message)

    async def send_fatal(self, message: str) -> None:
        self.error(message)


class DiscordAlertSink(BaseAlertSink):
    """Posts alerts to a Discord channel through a webhook.

    Fatal messages mention the configured users. Delivery failures are logged
    as warnings and never raised.
    """

    def __init__(
        self,
        target: str,
        num_profiles: int,
        webhook_url: str,
        user_name: str | None = None,
        users_to_notify: Sequence[str] = (),
        session: aiohttp.ClientSession | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(target, num_profiles, **kwargs)
        self.webhook_url = webhook_url
        self.user_name = user_name
        self.users_to_notify = list(users_to_notify)
        self._session = session
        self._owns_session = session is None

    async def send_message(self, message: str) -> None:
        await self._deliver(message)

    async def send_fatal(self, message: str) -> None:
        mentions = " ".join(f"<@{user}>" for user in self.users_to_notify)
        await self._deliver(f"{mentions} {message}" if mentions else message)

    async def close(self) -> None:
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None

    async def _deliver(self, content: str) -> None:
        try:
            await self._post(content)
        except AlertDeliveryError as e:
            self.warning(f"Discord alert not delivered: {e}")

    async def _post(self, content: str) -> None:
        max_length = Environment.ALERTS.DISCORD_MAX_LENGTH
        if len(content) > max_length:
            content = content[: max_length - 3] + "..."

        payload: dict[str, str] = {"content": content}
        if self.user_name:
            payload["username"] = self.user_name

        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=Environment.ALERTS.DISCORD_TIMEOUT)
            self._session = aiohttp.ClientSession(timeout=timeout)

        try:
            async with self._session.post(
                self.webhook_url,
                data=orjson.dumps(payload),
                headers={"Content-Type": "application/json"},
            ) as response:
                if not 200 <= response.status < 300:
                    body = (await response.read()).decode(errors="replace")
                    raise AlertDeliveryError(
                        f"webhook returned HTTP {response.status}: {body[:200]}"
                    )
        except (aiohttp.ClientError, TimeoutError) as e:
            raise AlertDeliveryError(f"webhook request failed: {e!r}") from e


class CompositeAlertSink:
    """Fans every alert out to several sinks."""

    def __init__(self, sinks: Sequence[AlertSinkProtocol]) -> None:
        self.sinks = list(sinks)

    async def notify(self, stage: str, record: IterationRecord) -> None:
        await asyncio.gather(*(sink.notify(stage, record) for sink in self.sinks))

    async def send_message(self, message: str) -> None:
        await asyncio.gather(*(sink.send_message(message) for sink in self.sinks))

    async def send_fatal(self, message: str) -> None:
        await asyncio.gather(*(sink.send_fatal(message) for sink in self.sinks))

    async def close(self) -> None:
        await asyncio.gather(*(sink.close() for sink in self.sinks))


def build_alert_sink(user_config: UserConfig) -> AlertSinkProtocol:
    """Build the alert sink for a run: always the log, plus Discord when configured."""
    target = user_config.describe_target()
    num_profiles = user_config.ramp.profiles
    sinks: list[AlertSinkProtocol] = [LoggingAlertSink(target, num_profiles)]

    alerts = user_config.alerts
    if alerts.discord_url:
        sinks.append(
            DiscordAlertSink(
                target,
                num_profiles,
                webhook_url=alerts.discord_url,
                user_name=alerts.discord_user_name,
                users_to_notify=alerts.discord_users,
            )
        )

    if len(sinks) == 1:
        return sinks[0]
    return CompositeAlertSink(sinks)
