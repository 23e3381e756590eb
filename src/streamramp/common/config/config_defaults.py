# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass


@dataclass(frozen=True)
class StreamTesterDefaults:
    HOST = "streamtester"
    PORT = 7934
    RTMP_HOST = "broadcaster"
    RTMP_PORT = 1935
    MEDIA_HOST = "broadcaster"
    MEDIA_PORT = 8935
    REQUEST_TIMEOUT = 3.0
    FILE_NAME = "official_test_source_2s_keys_24pfs.mp4"


@dataclass(frozen=True)
class RampDefaults:
    STATS_INTERVAL = 10.0
    MIN_SUCCESS_RATE = 99.0
    STREAMS_INIT = 1
    STREAMS_STEP = 1
    PROFILES = 1


@dataclass(frozen=True)
class ServiceDefaults:
    HTTP_HOST = "0.0.0.0"
    HTTP_PORT = 80
    START_DELAY = 10.0
    LOG_LEVEL = "INFO"
