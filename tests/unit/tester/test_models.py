# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest
from pydantic import ValidationError

from streamramp.tester.models import StartStreamsRequest, StartStreamsResponse, Stats


class TestStats:
    def test_missing_fields_default_to_zero(self) -> None:
        stats = Stats.model_validate({"finished": True})
        assert stats.finished is True
        assert stats.success_rate == 0.0
        assert stats.source_latencies.p_95 == 0

    def test_unknown_fields_are_kept(self) -> None:
        stats = Stats.model_validate(
            {"success_rate": 99.5, "wowza_mode": False, "raw_source_latencies": [1, 2]}
        )
        assert stats.model_extra == {
            "wowza_mode": False,
            "raw_source_latencies": [1, 2],
        }

    def test_latencies_are_decoded(self) -> None:
        stats = Stats.model_validate(
            {"transcoded_latencies": {"avg": 10, "p_50": 9, "p_95": 20, "p_99": 30}}
        )
        assert stats.transcoded_latencies.p_99 == 30

    def test_wrong_type_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Stats.model_validate({"success_rate": "most of them"})

    def test_summary(self) -> None:
        stats = Stats(
            success_rate=80.0,
            finished=True,
            downloaded_segments=8,
            should_have_downloaded_segments=10,
            failed_to_download_segments=2,
            connection_lost=1,
        )
        assert stats.summary() == (
            "success rate 80.00% (8/10 segments downloaded, 2 failed, "
            "1 connections lost, finished)"
        )


class TestStartStreams:
    def test_response_defaults_to_not_started(self) -> None:
        response = StartStreamsResponse.model_validate({})
        assert response.success is False
        assert response.base_manifest_id == ""

    def test_request_rejects_negative_stream_count(self) -> None:
        with pytest.raises(ValidationError):
            StartStreamsRequest(
                host="h",
                media_host="m",
                file_name="f.mp4",
                rtmp=1935,
                media=8935,
                simultaneous=-1,
                profiles_num=1,
            )
