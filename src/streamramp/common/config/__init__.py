# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from streamramp.common.config.alert_config import AlertConfig
from streamramp.common.config.base_config import BaseConfig
from streamramp.common.config.cli_parameter import CLIParameter
from streamramp.common.config.config_defaults import (
    RampDefaults,
    ServiceDefaults,
    StreamTesterDefaults,
)
from streamramp.common.config.groups import Groups
from streamramp.common.config.ramp_config import RampConfig
from streamramp.common.config.service_config import ServiceConfig
from streamramp.common.config.tester_config import StreamTesterConfig
from streamramp.common.config.user_config import UserConfig

__all__ = [
    "AlertConfig",
    "BaseConfig",
    "CLIParameter",
    "Groups",
    "RampConfig",
    "RampDefaults",
    "ServiceConfig",
    "ServiceDefaults",
    "StreamTesterConfig",
    "StreamTesterDefaults",
    "UserConfig",
]
