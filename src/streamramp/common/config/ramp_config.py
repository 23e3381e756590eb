# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from cyclopts import Parameter
from pydantic import ConfigDict, Field

from streamramp.common.config.base_config import BaseConfig
from streamramp.common.config.cli_parameter import CLIParameter
from streamramp.common.config.config_defaults import RampDefaults
from streamramp.common.config.groups import Groups


@Parameter(name="*")
class RampConfig(BaseConfig):
    """Settings of the concurrency ramp. Fixed for the lifetime of a controller."""

    model_config = ConfigDict(frozen=True)

    _CLI_GROUP = Groups.RAMP

    stats_interval: Annotated[
        float,
        Field(
            gt=0,
            description="Seconds between stats checks while a batch of streams is running.",
        ),
        CLIParameter(name=("--stats-interval",), group=_CLI_GROUP),
    ] = RampDefaults.STATS_INTERVAL

    min_success_rate: Annotated[
        float,
        Field(
            ge=0,
            le=100,
            description="Minimum success rate (percent) required to continue testing an "
            "increased number of streams. The ramp stops at the first level whose success "
            "rate is at or below this value.",
        ),
        CLIParameter(name=("--min-success-rate",), group=_CLI_GROUP),
    ] = RampDefaults.MIN_SUCCESS_RATE

    streams_init: Annotated[
        int,
        Field(
            ge=0,
            description="Number of streams to begin tests with. When it is not larger than "
            "--streams-step, the first level tested is --streams-init plus --streams-step.",
        ),
        CLIParameter(name=("--streams-init",), group=_CLI_GROUP),
    ] = RampDefaults.STREAMS_INIT

    streams_step: Annotated[
        int,
        Field(
            ge=1,
            description="Number of streams to increase by on each successive test.",
        ),
        CLIParameter(name=("--streams-step",), group=_CLI_GROUP),
    ] = RampDefaults.STREAMS_STEP

    profiles: Annotated[
        int,
        Field(ge=0, description="Number of transcoding profiles to request per stream."),
        CLIParameter(name=("--profiles",), group=_CLI_GROUP),
    ] = RampDefaults.PROFILES
