# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logging setup and the logger mixin shared by long-lived components."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from streamramp.common.config import ServiceConfig

__all__ = [
    "LoggerMixin",
    "setup_rich_logging",
]

# Third-party loggers that are too chatty at INFO
_QUIET_LOGGERS = ("aiohttp.access", "asyncio")


def setup_rich_logging(service_config: ServiceConfig) -> None:
    """Route all logging through a rich handler on stderr.

    Args:
        service_config: Service configuration providing the log level
    """
    if service_config.verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelNamesMapping()[service_config.log_level]
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        log_time_format="[%X]",
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


class LoggerMixin:
    """Gives a class leveled logging methods bound to a named logger.

    The logger defaults to the module of the concrete class.
    """

    def __init__(self, logger_name: str | None = None, **kwargs: Any) -> None:
        self.logger = logging.getLogger(logger_name or self.__class__.__module__)
        super().__init__(**kwargs)

    @property
    def is_debug_enabled(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.error(message, *args, **kwargs)

    def exception(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.exception(message, *args, **kwargs)
