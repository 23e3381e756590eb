# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Concurrency ramp controller.

Raises the number of concurrent streams on the stream tester one step at a
time and stops at the first level whose success rate is at or below the
configured minimum (the degradation point).
"""

from __future__ import annotations

import asyncio
import contextlib
from typing import TYPE_CHECKING, Any

from streamramp.common.exceptions import (
    RampCancelledError,
    RampError,
    StartFailureError,
    StatsFailureError,
    StreamTesterError,
)
from streamramp.common.logging import LoggerMixin
from streamramp.controller.models import IterationRecord, RampState, RunResult
from streamramp.tester.models import Stats

if TYPE_CHECKING:
    from streamramp.alerts.protocols import AlertSinkProtocol
    from streamramp.common.config import RampConfig
    from streamramp.tester.protocols import StreamTesterProtocol

__all__ = [
    "RampController",
    "initial_level",
]

BEGIN_ITERATION_STAGE = "begin iteration: "


def initial_level(streams_init: int, streams_step: int) -> int:
    """Level the ramp counts up from; the first tested level is this plus one step.

    When ``streams_init`` is larger than ``streams_step`` the step is taken off
    so that ``streams_init`` itself is the first level tested. Otherwise the
    first level tested is ``streams_init + streams_step``.
    """
    if streams_init > streams_step:
        return streams_init - streams_step
    return streams_init


class RampController(LoggerMixin):
    """Drives the stream tester through increasing concurrency levels.

    Each iteration starts a new batch (the previous one is not stopped), polls
    its stats every ``stats_interval`` seconds until the batch finishes, and
    continues only while the success rate stays strictly above
    ``min_success_rate``.

    Cancellation is checked before each batch is started and on every poll
    tick. A stats request that is already in flight is allowed to complete.
    """

    def __init__(
        self,
        client: StreamTesterProtocol,
        ramp_config: RampConfig,
        alert_sink: AlertSinkProtocol,
        **kwargs: Any,
    ) -> None:
        """Initialize RampController.

        Args:
            client: Stream tester client used to start and poll batches
            ramp_config: Ramp settings, fixed for the controller's lifetime
            alert_sink: Receives a progress event at the start of every iteration
        """
        super().__init__(**kwargs)
        self._client = client
        self.config = ramp_config
        self._alert_sink = alert_sink
        self._state = RampState.IDLE
        self._done = False

    @property
    def state(self) -> RampState:
        return self._state

    @property
    def done(self) -> bool:
        """True once a run has found the degradation point."""
        return self._done

    def is_running(self) -> bool:
        """True from the first batch start until the run reaches a terminal state."""
        return bool(self.get_manifest_id()) and self._state.is_active

    def get_manifest_id(self) -> str:
        """Base manifest id of the most recently started batch, or ""."""
        return self._client.base_manifest_id

    async def run(self, cancel_event: asyncio.Event | None = None) -> RunResult:
        """Ramp until the success rate degrades.

        Args:
            cancel_event: Setting this event aborts the run at the next
                suspension point

        Returns:
            The iteration at which degradation was observed, with the profile
            count used

        Raises:
            RampCancelledError: Cancellation was observed
            StartFailureError: A batch could not be started
            StatsFailureError: Stats could not be fetched while polling
            RampError: A run is already in progress on this controller
        """
        if self._state.is_active:
            raise RampError("A ramp run is already in progress")

        if cancel_event is None:
            cancel_event = asyncio.Event()

        self._done = False
        self._state = RampState.STARTING
        try:
            result = await self._ramp(cancel_event)
        except (RampCancelledError, asyncio.CancelledError):
            self._state = RampState.CANCELLED
            raise
        except BaseException:
            self._state = RampState.FAILED
            raise

        self._done = True
        self._state = RampState.DEGRADED
        return result

    async def _ramp(self, cancel_event: asyncio.Event) -> RunResult:
        num_streams = initial_level(self.config.streams_init, self.config.streams_step)
        stats = Stats()

        started = False
        while not started or stats.success_rate > self.config.min_success_rate:
            num_streams += self.config.streams_step
            started = True

            await self._alert_sink.notify(
                BEGIN_ITERATION_STAGE, IterationRecord(num_streams=num_streams, stats=stats)
            )

            self._raise_if_cancelled(cancel_event)

            await self._start_batch(num_streams)
            stats = await self._poll_until_finished(cancel_event)

            self.info(f"{num_streams} streams: {stats.summary()}")

        self.info(
            f"Success rate degrades at {num_streams} streams: {stats.success_rate}"
        )
        return RunResult(
            iteration=IterationRecord(num_streams=num_streams, stats=stats),
            num_profiles=self.config.profiles,
        )

    async def _start_batch(self, num_streams: int) -> None:
        self._state = RampState.STARTING
        try:
            response = await self._client.start_streams(
                num_streams, self.config.profiles
            )
        except StreamTesterError as e:
            raise StartFailureError(f"start stream failed: {e}") from e

        if not response.success:
            raise StartFailureError(
                f"start stream failed: success = {response.success}"
            )
        self.debug(
            f"Started {num_streams} streams as {response.base_manifest_id!r}"
        )

    async def _poll_until_finished(self, cancel_event: asyncio.Event) -> Stats:
        """Poll stats on a fixed-rate ticker until the batch reports finished.

        Ticks missed while a slow stats request was in flight are dropped
        rather than fired back to back.
        """
        self._state = RampState.POLLING
        loop = asyncio.get_running_loop()
        interval = self.config.stats_interval
        next_tick = loop.time() + interval

        while True:
            await self._wait_for_tick(next_tick, cancel_event)

            try:
                stats = await self._client.stats(self.get_manifest_id())
            except StreamTesterError as e:
                raise StatsFailureError(f"get stats failed: {e}") from e

            if stats.finished:
                return stats

            missed = int((loop.time() - next_tick) // interval)
            next_tick += interval * max(1, missed + 1)

    async def _wait_for_tick(
        self, deadline: float, cancel_event: asyncio.Event
    ) -> None:
        """Sleep until ``deadline`` unless cancelled first.

        Cancellation wins over a tick that is due at the same time.
        """
        self._raise_if_cancelled(cancel_event)
        delay = max(0.0, deadline - asyncio.get_running_loop().time())
        with contextlib.suppress(TimeoutError):
            await asyncio.wait_for(cancel_event.wait(), timeout=delay)
        self._raise_if_cancelled(cancel_event)

    @staticmethod
    def _raise_if_cancelled(cancel_event: asyncio.Event) -> None:
        if cancel_event.is_set():
            raise RampCancelledError("context cancelled")
