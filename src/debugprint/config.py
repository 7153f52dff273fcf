"""Settings for debugprint.

The on/off switch of the facility is an explicit value on
:class:`PrinterSettings`, handed to :func:`~debugprint.core.printer.build_printer`
when the printer is created. The environment is only one way to fill it in.

Environment:
    DEBUGPRINT_ENABLED: Set to '1', 'true', 'yes' or 'on' (case-insensitive)
                        to enable debug output. Any other value or unset
                        disables it.
    DEBUGPRINT_SEPARATOR: Optional default separator for print_separated.

Example:
    $ DEBUGPRINT_ENABLED=1 python script.py    # Debug enabled
    $ DEBUGPRINT_ENABLED=0 python script.py    # Debug disabled
    $ python script.py                         # Debug disabled (default)
"""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, field_validator

from debugprint.core.constants import (
    DEFAULT_SEPARATOR,
    ENABLED_ENV_VAR,
    SEPARATOR_ENV_VAR,
    TRUTHY_VALUES,
)

__all__ = ["PrinterSettings", "parse_flag"]


def parse_flag(raw: Any) -> bool:
    """Interpret a switch value the way DEBUGPRINT_ENABLED is interpreted.

    Booleans pass through. Strings are true when they are one of
    TRUTHY_VALUES after stripping and lowercasing. None is false.
    """
    if raw is None:
        return False
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        return raw.strip().lower() in TRUTHY_VALUES
    return bool(raw)


class PrinterSettings(BaseModel):
    """How the printer is built.

    Attributes:
        enabled: Whether print operations write anything
        separator: Separator used by print_separated when none is given
    """

    enabled: bool = False
    separator: str = DEFAULT_SEPARATOR

    model_config = {"frozen": True}

    @field_validator("enabled", mode="before")
    @classmethod
    def coerce_enabled(cls, value: Any) -> bool:
        return parse_flag(value)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PrinterSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            Settings with unset variables left at their defaults
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {"enabled": env.get(ENABLED_ENV_VAR, "")}
        separator = env.get(SEPARATOR_ENV_VAR)
        if separator is not None:
            values["separator"] = separator
        return cls(**values)
