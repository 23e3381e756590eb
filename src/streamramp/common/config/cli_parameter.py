# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from cyclopts import Group, Parameter


def CLIParameter(  # noqa: N802
    *, name: tuple[str, ...], group: Group | None = None, **kwargs: Any
) -> Parameter:
    """Build a cyclopts Parameter with the defaults every streamramp flag shares.

    Names are absolute (``--flag``) so nested config models flatten into a
    single flag namespace.
    """
    kwargs.setdefault("show_default", True)
    return Parameter(name=name, group=group, **kwargs)
