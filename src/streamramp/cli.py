# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line entry point."""

from collections.abc import Sequence

from cyclopts import App

from streamramp import __version__
from streamramp.common.config import ServiceConfig, UserConfig

app = App(
    name="streamramp",
    help="Find the number of concurrent streams a broadcaster sustains before "
    "its success rate degrades.",
    version=__version__,
)


@app.default
def run(
    user_config: UserConfig | None = None,
    service_config: ServiceConfig | None = None,
) -> None:
    """Ramp stream concurrency on the stream tester until the success rate degrades.

    Args:
        user_config: Stream tester, ramp and alert settings
        service_config: Status server, start delay and logging settings
    """
    from streamramp.cli_runner import run_test_driver

    run_test_driver(user_config or UserConfig(), service_config or ServiceConfig())


def main(tokens: Sequence[str] | None = None) -> None:
    app(tokens)
