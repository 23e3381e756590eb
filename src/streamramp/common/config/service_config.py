# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated, Literal

from cyclopts import Parameter
from pydantic import Field

from streamramp.common.config.base_config import BaseConfig
from streamramp.common.config.cli_parameter import CLIParameter
from streamramp.common.config.config_defaults import ServiceDefaults
from streamramp.common.config.groups import Groups

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@Parameter(name="*")
class ServiceConfig(BaseConfig):
    """Process-level settings: status server, start delay and logging."""

    _CLI_GROUP = Groups.SERVICE

    http_host: Annotated[
        str,
        Field(description="Interface the run status server binds to."),
        CLIParameter(name=("--http-host",), group=_CLI_GROUP),
    ] = ServiceDefaults.HTTP_HOST

    http_port: Annotated[
        int,
        Field(
            ge=0,
            le=65535,
            description="Port of the run status server. Use 0 to disable it.",
        ),
        CLIParameter(name=("--http-port",), group=_CLI_GROUP),
    ] = ServiceDefaults.HTTP_PORT

    start_delay: Annotated[
        float,
        Field(
            ge=0,
            description="Seconds to wait before starting the ramp, giving the services "
            "under test time to come up.",
        ),
        CLIParameter(name=("--start-delay",), group=_CLI_GROUP),
    ] = ServiceDefaults.START_DELAY

    log_level: Annotated[
        LogLevel,
        Field(description="Logging level."),
        CLIParameter(name=("--log-level",), group=_CLI_GROUP),
    ] = ServiceDefaults.LOG_LEVEL

    verbose: Annotated[
        bool,
        Field(description="Shortcut for --log-level DEBUG."),
        CLIParameter(name=("--verbose", "-v"), group=_CLI_GROUP, negative=()),
    ] = False
