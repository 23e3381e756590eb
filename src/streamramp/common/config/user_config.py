# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from cyclopts import Parameter
from pydantic import Field

from streamramp.common.config.alert_config import AlertConfig
from streamramp.common.config.base_config import BaseConfig
from streamramp.common.config.ramp_config import RampConfig
from streamramp.common.config.tester_config import StreamTesterConfig


@Parameter(name="*")
class UserConfig(BaseConfig):
    """Everything that describes a single ramp test."""

    tester: StreamTesterConfig = Field(default_factory=StreamTesterConfig)
    ramp: RampConfig = Field(default_factory=RampConfig)
    alerts: AlertConfig = Field(default_factory=AlertConfig)

    def describe_target(self) -> str:
        return self.tester.describe_target()
