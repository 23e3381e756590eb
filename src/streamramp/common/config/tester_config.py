# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from cyclopts import Parameter
from pydantic import Field

from streamramp.common.config.base_config import BaseConfig
from streamramp.common.config.cli_parameter import CLIParameter
from streamramp.common.config.config_defaults import StreamTesterDefaults
from streamramp.common.config.groups import Groups


@Parameter(name="*")
class StreamTesterConfig(BaseConfig):
    """Where the stream tester service lives and which broadcaster it should load."""

    _CLI_GROUP = Groups.STREAM_TESTER

    host: Annotated[
        str,
        Field(description="Hostname of the stream tester service."),
        CLIParameter(name=("--tester-host",), group=_CLI_GROUP),
    ] = StreamTesterDefaults.HOST

    port: Annotated[
        int,
        Field(ge=1, le=65535, description="HTTP port of the stream tester service."),
        CLIParameter(name=("--tester-port",), group=_CLI_GROUP),
    ] = StreamTesterDefaults.PORT

    rtmp_host: Annotated[
        str,
        Field(description="Hostname the stream tester ingests RTMP streams into."),
        CLIParameter(name=("--rtmp-host",), group=_CLI_GROUP),
    ] = StreamTesterDefaults.RTMP_HOST

    rtmp_port: Annotated[
        int,
        Field(ge=1, le=65535, description="RTMP ingest port."),
        CLIParameter(name=("--rtmp-port",), group=_CLI_GROUP),
    ] = StreamTesterDefaults.RTMP_PORT

    media_host: Annotated[
        str,
        Field(description="Hostname the stream tester downloads transcoded media from."),
        CLIParameter(name=("--media-host",), group=_CLI_GROUP),
    ] = StreamTesterDefaults.MEDIA_HOST

    media_port: Annotated[
        int,
        Field(ge=1, le=65535, description="HTTP media port."),
        CLIParameter(name=("--media-port",), group=_CLI_GROUP),
    ] = StreamTesterDefaults.MEDIA_PORT

    request_timeout: Annotated[
        float,
        Field(
            gt=0,
            description="Total timeout in seconds for each request to the stream tester. "
            "A request that exceeds it aborts the run.",
        ),
        CLIParameter(name=("--request-timeout",), group=_CLI_GROUP),
    ] = StreamTesterDefaults.REQUEST_TIMEOUT

    def describe_target(self) -> str:
        """Human-readable description of the system under test."""
        return (
            f"rtmp host: {self.rtmp_host}:{self.rtmp_port} / "
            f"media host: {self.media_host}:{self.media_port} "
            f"using streamtester host: {self.host}:{self.port}"
        )
