"""Settings and command line of the camera server for Video4Linux devices."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence

from camweb.options import (
    PRODUCT_VERSION,
    UsageError,
    UserGroup,
    default_config_file,
    parse_unsigned,
    parse_user_group,
    resolve_groups,
    split_option,
)

PLATFORM = "Linux"
DEVICE_NAME = "Video for Linux Camera"

SUPPORTED_SIZES = (
    (320, 240),
    (480, 360),
    (640, 480),
    (800, 600),
    (960, 720),
    (1120, 840),
    (1600, 1200),
    (1920, 1080),
    (2048, 1536),
    (2592, 1944),
    (3264, 2448),
    (3840, 2160),
    (4224, 3156),
)


@dataclasses.dataclass
class LinuxSettings:
    """Application settings of the Video4Linux camera server."""

    device_number: int = 0
    jpeg_encoding: bool = True
    frame_width: int = 640
    frame_height: int = 480
    frame_rate: int = 30
    web_port: int = 8000
    ht_realm: str = "cam2web"
    ht_digest_file_name: str = ""
    camera_config_file_name: str = dataclasses.field(default_factory=default_config_file)
    custom_web_content: str = "./web"
    camera_title: str = DEVICE_NAME
    viewers_group: UserGroup = UserGroup.ANYONE
    config_group: UserGroup = UserGroup.ANYONE


def default_settings() -> LinuxSettings:
    """Return the settings used when no options are given."""
    return LinuxSettings()


def usage() -> str:
    """Return the help text describing the command-line options."""
    size_lines = [
        f"               {index}: {width}x{height}"
        + (" (default)" if (width, height) == (640, 480) else "")
        + " "
        for index, (width, height) in enumerate(SUPPORTED_SIZES)
    ]
    lines = [
        "cam2web - streaming camera to web ",
        f"Version: {PRODUCT_VERSION} ",
        "",
        "Available command line options: ",
        "  -dev:<num>   Sets video device number to use. ",
        "               Default is 0. ",
        "  -type:<jpeg|yuyv>   Sets video device encoding type to use. ",
        f"  -size:<0-{len(SUPPORTED_SIZES) - 1}> Sets video size to one from the list below: ",
        *size_lines,
        "               Note: video device may switch to a different frame size, ",
        "                     the one it supports. ",
        "  -fps:<1-30>  Sets camera frame rate. Same is used for MJPEG stream. ",
        "               Default is 30. ",
        "  -port:<num>  Port number for web server to listen on. ",
        "               Default is 8000. ",
        "  -realm:<?>   HTTP digest authentication domain. ",
        "               Default is 'cam2web'. ",
        "  -htpass:<?>  htdigest file containing list of users to access the camera. ",
        "               Note: only users for the specified/default realm are loaded. ",
        "               Note: if users file is specified, then by default only users ",
        "                     from that list are allowed to view camera and only ",
        "                     'admin' user is allowed to change its settings. ",
        "  -viewer:<?>  Group of users allowed to view camera: any, user, admin. ",
        "               Default is 'any' if users file is not specified, ",
        "               or 'user' otherwise. ",
        "  -config:<?>  Group of users allowed to change camera settings. ",
        "               Default is 'any' if users file is not specified, ",
        "               or 'admin' otherwise. ",
        "  -fcfg:<?>    Name of the file to store camera settings in. ",
        "               Default is '~/.cam_config'. ",
        "  -web:<?>     Name of the folder to serve custom web content. ",
        "               By default embedded web files are used. ",
        "  -title:<?>   Name of the camera to be shown in WebUI. ",
        "               Use double quotes if the name contains spaces. ",
        "",
    ]
    return "\n".join(lines) + "\n"


def _apply_option(settings: LinuxSettings, arg: str, overrides: dict[str, UserGroup]) -> None:
    key, value = split_option(arg)

    if key == "dev":
        settings.device_number = parse_unsigned(value)
    elif key == "size":
        index = parse_unsigned(value)
        if index >= len(SUPPORTED_SIZES):
            raise UsageError(f"unsupported size index: {value!r}")
        settings.frame_width, settings.frame_height = SUPPORTED_SIZES[index]
    elif key == "fps":
        rate = parse_unsigned(value)
        settings.frame_rate = rate if 1 <= rate <= 30 else 30
    elif key == "port":
        settings.web_port = min(parse_unsigned(value), 65535)
    elif key == "realm":
        settings.ht_realm = value
    elif key == "htpass":
        settings.ht_digest_file_name = value
        # A users file means security is wanted: viewers must log in,
        # only admins may change settings.
        settings.viewers_group = UserGroup.USER
        settings.config_group = UserGroup.ADMIN
    elif key == "viewer":
        overrides["viewer"] = parse_user_group(value)
    elif key == "config":
        overrides["config"] = parse_user_group(value)
    elif key == "fcfg":
        settings.camera_config_file_name = value
    elif key == "web":
        settings.custom_web_content = value
    elif key == "title":
        settings.camera_title = value
    elif key == "type":
        settings.jpeg_encoding = value != "yuyv"
    else:
        raise UsageError(f"unknown option: {key!r}")


def parse_command_line(args: Sequence[str]) -> LinuxSettings:
    """Build settings from command-line arguments (without the program name).

    Raises UsageError carrying the help text if any argument is invalid.
    """
    settings = default_settings()
    overrides: dict[str, UserGroup] = {}
    failed = False

    for arg in args:
        try:
            _apply_option(settings, arg, overrides)
        except UsageError:
            failed = True
            break

    settings = resolve_groups(settings, overrides.get("viewer"), overrides.get("config"))

    if failed:
        raise UsageError(usage())
    return settings