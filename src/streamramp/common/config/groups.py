# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from cyclopts import Group


class Groups:
    """Help-screen groups for CLI flags, in display order."""

    STREAM_TESTER = Group.create_ordered("Stream Tester")
    RAMP = Group.create_ordered("Ramp")
    ALERTS = Group.create_ordered("Alerts")
    SERVICE = Group.create_ordered("Service")
