# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for streamramp.

Every error raised by this package derives from StreamRampError. Ramp aborts
derive from RampError so the entry point can treat them as one fatal path.
"""

__all__ = [
    "AlertDeliveryError",
    "RampCancelledError",
    "RampError",
    "StartFailureError",
    "StatsFailureError",
    "StreamRampError",
    "StreamTesterError",
]


class StreamRampError(Exception):
    """Base class for all streamramp errors."""


class StreamTesterError(StreamRampError):
    """A request to the stream tester service failed.

    Raised for transport errors, non-2xx responses and response bodies that do
    not match the expected JSON shape.

    Attributes:
        operation: Name of the failed operation (e.g. "start_streams")
        status: HTTP status code, if a response was received
    """

    def __init__(self, message: str, operation: str, status: int | None = None):
        super().__init__(message)
        self.operation = operation
        self.status = status


class RampError(StreamRampError):
    """A ramp run was aborted. No result is available."""


class RampCancelledError(RampError):
    """Cancellation was observed at one of the ramp's suspension points."""


class StartFailureError(RampError):
    """A batch of streams could not be started."""


class StatsFailureError(RampError):
    """Stats could not be fetched while polling an active batch."""


class AlertDeliveryError(StreamRampError):
    """An alert could not be delivered to its channel."""
