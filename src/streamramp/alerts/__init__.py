# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from streamramp.alerts.protocols import AlertSinkProtocol
from streamramp.alerts.sinks import (
    BaseAlertSink,
    CompositeAlertSink,
    DiscordAlertSink,
    LoggingAlertSink,
    build_alert_sink,
)

__all__ = [
    "AlertSinkProtocol",
    "BaseAlertSink",
    "CompositeAlertSink",
    "DiscordAlertSink",
    "LoggingAlertSink",
    "build_alert_sink",
]
