# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Data models for the ramp controller."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from streamramp.tester.models import Stats


class RampState(str, Enum):
    """Lifecycle of a ramp run."""

    IDLE = "idle"
    STARTING = "starting"
    POLLING = "polling"
    DEGRADED = "degraded"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def is_active(self) -> bool:
        return self in (RampState.STARTING, RampState.POLLING)


class IterationRecord(BaseModel):
    """A concurrency level and the stats observed for it.

    Attributes:
        num_streams: Concurrency level attempted
        stats: Stats snapshot for that level (empty before the first snapshot)
    """

    model_config = ConfigDict(frozen=True)

    num_streams: int = 0
    stats: Stats = Field(default_factory=Stats)


class RunResult(BaseModel):
    """Outcome of a completed ramp.

    Attributes:
        iteration: The iteration at which degradation was observed
        num_profiles: Number of transcoding profiles used for every batch
    """

    model_config = ConfigDict(frozen=True)

    iteration: IterationRecord
    num_profiles: int

    @property
    def num_streams(self) -> int:
        return self.iteration.num_streams

    @property
    def stats(self) -> Stats:
        return self.iteration.stats
