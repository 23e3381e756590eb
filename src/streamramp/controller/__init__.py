# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from streamramp.controller.models import IterationRecord, RampState, RunResult
from streamramp.controller.ramp import RampController, initial_level

__all__ = [
    "IterationRecord",
    "RampController",
    "RampState",
    "RunResult",
    "initial_level",
]
