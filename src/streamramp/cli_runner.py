# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import asyncio
import contextlib
import logging
import signal
import sys

from streamramp.alerts import AlertSinkProtocol, build_alert_sink
from streamramp.common.config import ServiceConfig, UserConfig
from streamramp.common.exceptions import RampCancelledError, RampError
from streamramp.common.logging import setup_rich_logging
from streamramp.controller import RampController, RunResult
from streamramp.status import StatusServer
from streamramp.tester import StreamTesterClient

logger = logging.getLogger(__name__)


def format_result(user_config: UserConfig, result: RunResult) -> str:
    """Render the final message for a completed ramp."""
    return (
        f"concurrency test results for {user_config.describe_target()} - "
        f"success rate degrades at {result.num_streams} streams: "
        f"{result.stats.summary()}"
    )


def run_test_driver(user_config: UserConfig, service_config: ServiceConfig) -> None:
    """Run one ramp test to completion and exit non-zero if it failed."""
    setup_rich_logging(service_config)
    logger.info("testdriver started")
    try:
        asyncio.run(_drive(user_config, service_config))
    except RampError:
        sys.exit(1)
    finally:
        logger.info("testdriver stopped")


async def _drive(
    user_config: UserConfig,
    service_config: ServiceConfig,
    alert_sink: AlertSinkProtocol | None = None,
    cancel_event: asyncio.Event | None = None,
) -> RunResult:
    """Wire up the client, alerts, controller and status server, then ramp.

    SIGINT and SIGTERM cancel the ramp at its next suspension point. A
    cancellation during the start delay aborts before any alert is sent.
    """
    if cancel_event is None:
        cancel_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        # Not available on Windows event loops
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, cancel_event.set)

    if alert_sink is None:
        alert_sink = build_alert_sink(user_config)

    async with StreamTesterClient(user_config.tester) as client:
        controller = RampController(client, user_config.ramp, alert_sink)

        status_server = None
        try:
            if service_config.http_port > 0:
                status_server = StatusServer(
                    controller,
                    host=service_config.http_host,
                    port=service_config.http_port,
                    client=client,
                )
                await status_server.start()

            if service_config.start_delay > 0:
                logger.info(f"Waiting {service_config.start_delay}s before starting")
                with contextlib.suppress(TimeoutError):
                    await asyncio.wait_for(
                        cancel_event.wait(), timeout=service_config.start_delay
                    )
            if cancel_event.is_set():
                logger.warning("Cancelled before the ramp started")
                raise RampCancelledError("context cancelled")

            # TODO: add a random run id to the messages so concurrent drivers can be told apart
            await alert_sink.send_message(
                f"concurrency test started for {user_config.describe_target()}"
            )

            try:
                result = await controller.run(cancel_event)
            except RampError as e:
                await alert_sink.send_fatal(f"FAILED: {e}")
                logger.error(f"FAILED: {e}")
                raise

            message = format_result(user_config, result)
            if status_server is not None:
                status_server.publish_result(message)
            await alert_sink.send_message(message)
            return result
        finally:
            if status_server is not None:
                await status_server.stop()
            await alert_sink.close()
            for sig in (signal.SIGINT, signal.SIGTERM):
                with contextlib.suppress(NotImplementedError):
                    loop.remove_signal_handler(sig)
