"""Command-line option helpers and shared pieces of the camera server apps."""

from __future__ import annotations

import dataclasses
import enum
import os
import re
import sys
import threading
from typing import Any, TextIO

from camweb.video import VideoSourceListener

PRODUCT_NAME = "cam2web"
PRODUCT_VERSION = "1.1.0"

_UINT32_MASK = 0xFFFFFFFF
_ULONG_MAX = 0xFFFFFFFFFFFFFFFF
_UNSIGNED_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")

_USER_GROUPS: dict[str, "UserGroup"] = {}


class UserGroup(enum.Enum):
    """Group of users allowed to access a resource."""

    ANYONE = 0
    USER = 1
    ADMIN = 2


_USER_GROUPS.update(
    {"any": UserGroup.ANYONE, "user": UserGroup.USER, "admin": UserGroup.ADMIN}
)


class UsageError(ValueError):
    """Raised when the command line cannot be understood."""


class CameraErrorListener(VideoSourceListener):
    """Reports camera errors and raises an exit event on fatal ones."""

    def __init__(
        self,
        exit_event: threading.Event | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.exit_event = exit_event if exit_event is not None else threading.Event()
        self._stream = stream

    def on_new_image(self, image: Any) -> None:
        """Frames are of no interest to this listener."""

    def on_error(self, message: str, fatal: bool) -> None:
        kind = "Fatal" if fatal else "Error"
        stream = self._stream if self._stream is not None else sys.stdout
        print(f"[{kind}] : {message} ", file=stream)
        if fatal:
            self.exit_event.set()


def split_option(arg: str) -> tuple[str, str]:
    """Split an option of the form ``-key:value`` into key and value."""
    if not arg.startswith("-") or ":" not in arg:
        raise UsageError(f"malformed option: {arg!r}")
    key, _, value = arg[1:].partition(":")
    if not key or not value:
        raise UsageError(f"malformed option: {arg!r}")
    return key, value


def parse_unsigned(value: str) -> int:
    """Read a leading unsigned decimal number as a 32-bit value.

    Leading whitespace and a sign are accepted; negative numbers wrap
    around the way an unsigned conversion does.
    """
    match = _UNSIGNED_PATTERN.match(value)
    if match is None:
        raise UsageError(f"not a number: {value!r}")
    sign, digits = match.groups()
    number = min(int(digits), _ULONG_MAX)
    if sign == "-":
        number = -number % (_ULONG_MAX + 1)
    return number & _UINT32_MASK


def parse_user_group(value: str) -> UserGroup:
    """Map ``any``, ``user`` or ``admin`` to a user group."""
    try:
        return _USER_GROUPS[value]
    except KeyError:
        raise UsageError(f"unknown user group: {value!r}") from None


def default_config_file() -> str:
    """Return the default camera settings file in the user's home directory."""
    try:
        import pwd
    except ImportError:
        home = os.path.expanduser("~")
        return home + "/.cam_config" if home and home != "~" else ""
    try:
        home = pwd.getpwuid(os.getuid()).pw_dir
    except KeyError:
        return ""
    return home + "/.cam_config"


def resolve_groups(settings, viewers_group, config_group):
    """Apply requested viewer/config group overrides to the settings.

    Restricting access without a users file makes no sense, so in that
    case a warning is printed and the settings are returned unchanged.
    """
    restricts = any(
        group is not None and group is not UserGroup.ANYONE
        for group in (viewers_group, config_group)
    )
    if restricts and not settings.ht_digest_file_name:
        print(
            "Warning: users file was not specified, so ignoring the specified "
            "viewer/configuration groups. \n"
        )
        return settings

    changes = {}
    if viewers_group is not None:
        changes["viewers_group"] = viewers_group
    if config_group is not None:
        changes["config_group"] = config_group
    return dataclasses.replace(settings, **changes) if changes else settings


def build_version_info(platform: str) -> dict[str, str]:
    """Return the read-only version properties for a platform."""
    return {
        "product": PRODUCT_NAME,
        "version": PRODUCT_VERSION,
        "platform": platform,
    }


def build_camera_info(device: str, title: str, width: int, height: int) -> dict[str, str]:
    """Return the read-only informational properties of a camera."""
    return {
        "device": device,
        "title": title,
        "width": str(width),
        "height": str(height),
    }