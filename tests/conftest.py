# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from streamramp.common.config import (
    RampConfig,
    ServiceConfig,
    StreamTesterConfig,
    UserConfig,
)
from tests.fakes import RecordingAlertSink


@pytest.fixture
def tester_config() -> StreamTesterConfig:
    return StreamTesterConfig(
        host="tester.local",
        port=7934,
        rtmp_host="rtmp.local",
        rtmp_port=1935,
        media_host="media.local",
        media_port=8935,
    )


@pytest.fixture
def ramp_config() -> RampConfig:
    """Ramp config with a fast poll interval so tests finish quickly."""
    return RampConfig(
        stats_interval=0.001,
        min_success_rate=99.0,
        streams_init=1,
        streams_step=1,
        profiles=2,
    )


@pytest.fixture
def user_config(tester_config: StreamTesterConfig, ramp_config: RampConfig) -> UserConfig:
    return UserConfig(tester=tester_config, ramp=ramp_config)


@pytest.fixture
def service_config() -> ServiceConfig:
    return ServiceConfig(http_port=0, start_delay=0)


@pytest.fixture
def alert_sink() -> RecordingAlertSink:
    return RecordingAlertSink()
