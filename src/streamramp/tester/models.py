# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Wire models of the stream tester HTTP API."""

from pydantic import BaseModel, ConfigDict, Field


class StartStreamsRequest(BaseModel):
    """Body of POST /start_streams.

    Attributes:
        host: RTMP ingest host
        media_host: Host to download transcoded media from
        file_name: Test asset the tester streams
        rtmp: RTMP ingest port
        media: Media HTTP port
        repeat: Number of passes over the asset
        simultaneous: Number of concurrent streams to start
        profiles_num: Number of transcoding profiles per stream
        measure_latency: Ask the tester to measure segment latencies
        http_ingest: Ingest over HTTP instead of RTMP
    """

    host: str
    media_host: str
    file_name: str
    rtmp: int
    media: int
    repeat: int = 1
    simultaneous: int = Field(ge=0)
    profiles_num: int = Field(ge=0)
    measure_latency: bool = False
    http_ingest: bool = False


class StartStreamsResponse(BaseModel):
    """Response of POST /start_streams."""

    model_config = ConfigDict(extra="allow")

    success: bool = False
    base_manifest_id: str = ""


class Latencies(BaseModel):
    """Latency percentiles in nanoseconds."""

    model_config = ConfigDict(extra="allow")

    avg: int = 0
    p_50: int = 0
    p_95: int = 0
    p_99: int = 0


class Stats(BaseModel):
    """Stats snapshot for a batch of streams.

    Only ``finished`` and ``success_rate`` drive the ramp. The remaining fields
    are carried for reporting, and fields unknown to this model are kept.
    """

    model_config = ConfigDict(extra="allow")

    rtmp_active_streams: int = 0
    rtmp_streams: int = 0
    media_streams: int = 0
    total_segments_to_send: int = 0
    sent_segments: int = 0
    downloaded_segments: int = 0
    should_have_downloaded_segments: int = 0
    failed_to_download_segments: int = 0
    bytes_downloaded: int = 0
    retries: int = 0
    success_rate: float = 0.0
    connection_lost: int = 0
    finished: bool = False
    profiles_num: int = 0
    source_latencies: Latencies = Field(default_factory=Latencies)
    transcoded_latencies: Latencies = Field(default_factory=Latencies)

    def summary(self) -> str:
        """One-line rendering used in logs and result messages."""
        state = "finished" if self.finished else "running"
        return (
            f"success rate {self.success_rate:.2f}% "
            f"({self.downloaded_segments}/{self.should_have_downloaded_segments} segments downloaded, "
            f"{self.failed_to_download_segments} failed, "
            f"{self.connection_lost} connections lost, {state})"
        )
