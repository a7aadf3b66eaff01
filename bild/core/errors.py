# SPDX-License-Identifier: MIT
"""Custom exceptions for bild.

Only a handful of conditions abort a bild run. Everything else (a missing
descriptor, an unset project name, no sources) is logged as a warning and
the pipeline carries on.
"""

from __future__ import annotations

from pathlib import Path


class BildError(Exception):
    """Base class for all bild exceptions.

    Attributes:
        message: The error message.
        path: Optional file the error relates to.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class SettingsError(BildError):
    """Invalid bild.toml settings file.

    Raised when the settings file cannot be parsed or holds a value
    of the wrong type.
    """


class CommandFormatError(BildError):
    """A compiler command could not be formatted.

    This is the only fatal condition during a build. It is raised when a
    token of the assembled command cannot be handed to a process.

    Attributes:
        token: The offending command token.
    """

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"cannot format command token: {token!r}")
