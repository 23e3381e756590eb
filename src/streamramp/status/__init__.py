# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from streamramp.status.server import RunStatusProtocol, StatusServer

__all__ = [
    "RunStatusProtocol",
    "StatusServer",
]
