import pytest

from camweb.linux import (
    LinuxSettings,
    default_settings,
    parse_command_line,
    usage,
)
from camweb.options import UsageError, UserGroup


def test_default_settings():
    settings = default_settings()
    assert (settings.frame_width, settings.frame_height) == (640, 480)
    assert settings.frame_rate == 30
    assert settings.web_port == 8000
    assert settings.ht_realm == "cam2web"
    assert settings.camera_title == "Video for Linux Camera"
    assert settings.jpeg_encoding is True
    assert settings.viewers_group is UserGroup.ANYONE
    assert settings.camera_config_file_name.endswith("/.cam_config")


def test_no_arguments_gives_defaults():
    assert parse_command_line([]) == default_settings()


def test_device_number():
    assert parse_command_line(["-dev:2"]).device_number == 2


@pytest.mark.parametrize(
    "index, size", [("0", (320, 240)), ("2", (640, 480)), ("12", (4224, 3156))]
)
def test_size_index(index, size):
    settings = parse_command_line([f"-size:{index}"])
    assert (settings.frame_width, settings.frame_height) == size


@pytest.mark.parametrize("index", ["13", "-1", "x"])
def test_bad_size_index(index):
    with pytest.raises(UsageError):
        parse_command_line([f"-size:{index}"])


@pytest.mark.parametrize("value, expected", [("15", 15), ("0", 30), ("45", 30)])
def test_frame_rate_is_limited(value, expected):
    assert parse_command_line([f"-fps:{value}"]).frame_rate == expected


def test_port_is_clamped():
    assert parse_command_line(["-port:70000"]).web_port == 65535


def test_htpass_restricts_groups():
    settings = parse_command_line(["-htpass:users.htdigest"])
    assert settings.ht_digest_file_name == "users.htdigest"
    assert settings.viewers_group is UserGroup.USER
    assert settings.config_group is UserGroup.ADMIN


def test_group_override_with_users_file_regardless_of_order():
    settings = parse_command_line(["-viewer:any", "-htpass:users.htdigest"])
    assert settings.viewers_group is UserGroup.ANYONE
    assert settings.config_group is UserGroup.ADMIN


def test_group_override_without_users_file_is_ignored(capsys):
    settings = parse_command_line(["-viewer:admin"])
    assert settings.viewers_group is UserGroup.ANYONE
    assert "Warning" in capsys.readouterr().out


def test_unknown_group_is_error():
    with pytest.raises(UsageError):
        parse_command_line(["-config:root"])


@pytest.mark.parametrize("value, expected", [("yuyv", False), ("jpeg", True)])
def test_encoding_type(value, expected):
    assert parse_command_line([f"-type:{value}"]).jpeg_encoding is expected


def test_string_options():
    settings = parse_command_line(
        ["-realm:home", "-fcfg:cam.cfg", "-web:site", "-title:Front door:left"]
    )
    assert settings.ht_realm == "home"
    assert settings.camera_config_file_name == "cam.cfg"
    assert settings.custom_web_content == "site"
    assert settings.camera_title == "Front door:left"


@pytest.mark.parametrize("arg", ["-bogus:1", "dev:1", "-dev", "-dev:"])
def test_invalid_arguments_raise_usage(arg):
    with pytest.raises(UsageError) as info:
        parse_command_line([arg])
    assert "Available command line options" in str(info.value)


def test_usage_lists_sizes_and_version():
    text = usage()
    assert "Version: 1.1.0" in text
    assert "0: 320x240" in text
    assert "2: 640x480 (default)" in text
    assert "12: 4224x3156" in text


def test_settings_is_plain_dataclass():
    settings = LinuxSettings(web_port=8080)
    assert parse_command_line(["-port:8080"]).web_port == settings.web_port