# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the configuration models."""

import pytest
from pydantic import ValidationError

from streamramp.common.config import (
    AlertConfig,
    RampConfig,
    ServiceConfig,
    StreamTesterConfig,
    UserConfig,
)


class TestDefaults:
    def test_tester_defaults(self) -> None:
        config = StreamTesterConfig()
        assert (config.host, config.port) == ("streamtester", 7934)
        assert (config.rtmp_host, config.rtmp_port) == ("broadcaster", 1935)
        assert (config.media_host, config.media_port) == ("broadcaster", 8935)
        assert config.request_timeout == 3.0

    def test_ramp_defaults(self) -> None:
        config = RampConfig()
        assert config.stats_interval == 10.0
        assert config.min_success_rate == 99.0
        assert config.streams_init == 1
        assert config.streams_step == 1
        assert config.profiles == 1

    def test_service_defaults(self) -> None:
        config = ServiceConfig()
        assert config.http_port == 80
        assert config.start_delay == 10.0
        assert config.log_level == "INFO"
        assert config.verbose is False


class TestRampConfig:
    def test_frozen(self, ramp_config: RampConfig) -> None:
        with pytest.raises(ValidationError):
            ramp_config.streams_step = 5

    @pytest.mark.parametrize("field,value", [
        ("stats_interval", 0),
        ("stats_interval", -1.0),
        ("min_success_rate", -0.1),
        ("min_success_rate", 100.1),
        ("streams_init", -1),
        ("streams_step", 0),
        ("profiles", -1),
    ])  # fmt: skip
    def test_out_of_range_rejected(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError):
            RampConfig(**{field: value})

    def test_zero_init_and_profiles_allowed(self) -> None:
        config = RampConfig(streams_init=0, profiles=0)
        assert config.streams_init == 0
        assert config.profiles == 0

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RampConfig(streams_max=10)


class TestAlertConfig:
    @pytest.mark.parametrize("raw,expected", [
        (None, []),
        ("", []),
        ("123", ["123"]),
        ("123,456", ["123", "456"]),
        (" 123 , ,456 ", ["123", "456"]),
        (["789"], ["789"]),
    ])  # fmt: skip
    def test_discord_users_parsed(self, raw, expected: list[str]) -> None:
        assert AlertConfig(discord_users=raw).discord_users == expected

    def test_default_discord_users_is_empty_list(self) -> None:
        assert AlertConfig().discord_users == []

    @pytest.mark.parametrize("raw", ["alice", "123,bob", "12.5"])
    def test_non_numeric_user_rejected(self, raw: str) -> None:
        with pytest.raises(ValidationError, match="Invalid Discord user ID"):
            AlertConfig(discord_users=raw)


class TestDescribeTarget:
    def test_user_config_delegates_to_tester(self, tester_config: StreamTesterConfig) -> None:
        expected = (
            "rtmp host: rtmp.local:1935 / media host: media.local:8935 "
            "using streamtester host: tester.local:7934"
        )
        assert tester_config.describe_target() == expected
        assert UserConfig(tester=tester_config).describe_target() == expected


class TestServiceConfig:
    def test_port_zero_disables_server(self) -> None:
        assert ServiceConfig(http_port=0).http_port == 0

    @pytest.mark.parametrize("port", [-1, 65536])
    def test_invalid_port_rejected(self, port: int) -> None:
        with pytest.raises(ValidationError):
            ServiceConfig(http_port=port)

    def test_invalid_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ServiceConfig(log_level="LOUD")
