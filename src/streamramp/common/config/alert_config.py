# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated, Any

from cyclopts import Parameter
from pydantic import Field, field_validator

from streamramp.common.config.base_config import BaseConfig
from streamramp.common.config.cli_parameter import CLIParameter
from streamramp.common.config.groups import Groups


@Parameter(name="*")
class AlertConfig(BaseConfig):
    """Where progress and failure notifications are delivered."""

    _CLI_GROUP = Groups.ALERTS

    @field_validator("discord_users", mode="before")
    @classmethod
    def parse_discord_users(cls, v: str | list[str] | None) -> list[str]:
        """Parse a comma-separated list of Discord user IDs from CLI input.

        Empty entries are dropped, so "" and None both mean "notify nobody".

        Raises:
            ValueError: If an ID is not numeric
        """
        if v is None:
            return []
        parts = v.split(",") if isinstance(v, str) else list(v)
        users = [str(part).strip() for part in parts if str(part).strip()]
        for user in users:
            if not user.isdigit():
                raise ValueError(
                    f"Invalid Discord user ID: '{user}'. "
                    f"User IDs are numeric snowflakes. "
                    f"Example: --discord-users 123456789012345678,234567890123456789"
                )
        return users

    discord_url: Annotated[
        str | None,
        Field(description="URL of a Discord webhook to send progress and result messages to."),
        CLIParameter(name=("--discord-url",), group=_CLI_GROUP),
    ] = None

    discord_user_name: Annotated[
        str | None,
        Field(description="User name to post Discord messages as."),
        CLIParameter(name=("--discord-user-name",), group=_CLI_GROUP),
    ] = None

    discord_users: Annotated[
        Any,  # CLI accepts a comma-separated string, validator converts to list[str]
        Field(
            validate_default=True,
            description="Comma-separated Discord user IDs to mention when a run fails.",
        ),
        CLIParameter(name=("--discord-users",), group=_CLI_GROUP),
    ] = None
