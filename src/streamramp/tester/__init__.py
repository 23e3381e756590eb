# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from streamramp.tester.client import StreamTesterClient
from streamramp.tester.models import (
    Latencies,
    StartStreamsRequest,
    StartStreamsResponse,
    Stats,
)
from streamramp.tester.protocols import StreamTesterProtocol

__all__ = [
    "Latencies",
    "StartStreamsRequest",
    "StartStreamsResponse",
    "Stats",
    "StreamTesterClient",
    "StreamTesterProtocol",
]
