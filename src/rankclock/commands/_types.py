"""Click parameter types shared by the subcommands."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

import click

from rankclock.domain.parsing import date_from_string, date_from_unix

_EPOCH = re.compile(r"^-?\d+$")


class InstantParamType(click.ParamType):
    """Accept epoch seconds (all digits) or any date string the parsers know."""

    name = "instant"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> datetime:
        if isinstance(value, datetime):
            return value
        text = str(value).strip()
        instant = date_from_unix(text) if _EPOCH.match(text) else date_from_string(text)
        if instant is None:
            self.fail(f"{value!r} is not a unix timestamp or a date string", param, ctx)
        return instant


INSTANT = InstantParamType()
