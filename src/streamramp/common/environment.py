# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment-driven settings that are not exposed as CLI flags.

Configuration via environment variables:
    STREAMRAMP_STATUS_REQUEST_TIMEOUT=5.0   # Status server request read timeout
    STREAMRAMP_ALERTS_DISCORD_TIMEOUT=5.0   # Discord webhook request timeout
    STREAMRAMP_ALERTS_DISCORD_MAX_LENGTH=2000  # Truncate messages to this length
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Environment"]


class _StatusSettings(BaseSettings):
    """Settings for the run status server."""

    model_config = SettingsConfigDict(env_prefix="STREAMRAMP_STATUS_")

    REQUEST_TIMEOUT: float = Field(
        default=5.0,
        gt=0,
        description="Seconds to wait for a client to send its request line",
    )


class _AlertSettings(BaseSettings):
    """Settings for alert delivery."""

    model_config = SettingsConfigDict(env_prefix="STREAMRAMP_ALERTS_")

    DISCORD_TIMEOUT: float = Field(
        default=5.0,
        gt=0,
        description="Total timeout in seconds for a Discord webhook request",
    )
    DISCORD_MAX_LENGTH: int = Field(
        default=2000,
        ge=1,
        description="Discord rejects message content longer than this",
    )


class _Environment:
    """Namespace of all environment settings groups."""

    def __init__(self) -> None:
        self.STATUS = _StatusSettings()
        self.ALERTS = _AlertSettings()


Environment = _Environment()
