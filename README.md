# camweb

Building blocks for an application that streams a camera to the web:
property sets, the video source and listener interfaces, and the command
line settings of a Video for Linux camera and of a Raspberry Pi camera.

The package needs nothing beyond the standard library and supports
Python 3.10 and later. The `test` extra pulls in pytest.

## Modules

- **`camweb.information`** – `ObjectInformation` describes an object that
  exposes named string properties (`get_property`, `get_all_properties`);
  `ObjectConfigurator` adds `set_property`. `ObjectInformationMap` is a
  read-only set backed by a mapping given at construction. Asking for a
  property that does not exist raises `UnknownPropertyError`, a subclass of
  `KeyError`.
- **`camweb.video`** – the abstract `VideoSource` (`start`,
  `signal_to_stop`, `wait_for_stop`, `is_running`, `frames_received`,
  `set_listener`), whose instances refuse to be copied or pickled; the
  `VideoSourceListener` interface (`on_new_image`, `on_error`); and
  `VideoSourceListenerChain`, which forwards every notification to each
  listener added to it, in the order they were added.
- **`camweb.options`** – pieces shared by the front ends: `UserGroup`
  (`ANYONE`, `USER`, `ADMIN`), `UsageError`, `split_option`,
  `parse_unsigned`, `parse_user_group`, `default_config_file`,
  `resolve_groups`, `build_version_info`, `build_camera_info` and
  `CameraErrorListener`.
- **`camweb.linux`** and **`camweb.pi`** – `LinuxSettings` and
  `PiSettings`, with `default_settings()`, `usage()` and
  `parse_command_line(args)` in each.

## Property sets

```python
from camweb.information import ObjectInformationMap, UnknownPropertyError

info = ObjectInformationMap({"product": "camweb", "platform": "Linux"})

info.get_property("product")      # "camweb"
info.get_all_properties()         # {"platform": "Linux", "product": "camweb"}

try:
    info.get_property("colour")
except UnknownPropertyError:
    ...
```

`get_all_properties` returns a fresh dictionary ordered by property name.

`build_version_info("Linux")` gives the product, version and platform
properties; `build_camera_info(device, title, width, height)` gives the
device, title, width and height, the numbers as strings.

## Chaining listeners

```python
from camweb.video import VideoSourceListener, VideoSourceListenerChain

class Printer(VideoSourceListener):
    def on_new_image(self, image):
        print("frame", image)

    def on_error(self, message, fatal):
        print("fatal" if fatal else "error", message)

chain = VideoSourceListenerChain()
chain.add(Printer())
chain.add(None)          # ignored
chain.on_error("device unplugged", True)
len(chain)               # 1
chain.clear()
```

`CameraErrorListener` prints `[Error] : <message>` or `[Fatal] : <message>`
and, on a fatal error, sets its `exit_event` (a `threading.Event`, created
if none is given). It ignores frames.

## Command line settings

Options take the form `-key:value`, for example `-size:2`, `-fps:25`,
`-port:8080`, `-htpass:users.htdigest`, `-viewer:user` or
`-title:"Front door"`. `parse_command_line` takes the arguments without the
program name and returns a settings dataclass; on the first option it
cannot understand it raises `UsageError` whose message is the help text
from `usage()`.

```python
from camweb.linux import parse_command_line
from camweb.options import UsageError

try:
    settings = parse_command_line(["-size:3", "-fps:15", "-port:8080"])
except UsageError as error:
    print(error)
else:
    print(settings.frame_width, settings.frame_height)   # 800 600
```

Both front ends accept `-size`, `-fps`, `-port`, `-realm`, `-htpass`,
`-viewer`, `-config`, `-fcfg`, `-web` and `-title`. The Linux one also
takes `-dev:<num>` and `-type:<jpeg|yuyv>` and offers 13 frame sizes
(0–12); the Raspberry Pi one takes `-jpeg:<quality>` (kept within 1–100)
and offers 8 frame sizes (0–7), chosen by the first character of the value.
A frame rate outside 1–30 becomes 30; a port above 65535 becomes 65535.

Defaults: 640x480 at 30 frames per second, port 8000, realm `cam2web`,
web content folder `./web`, camera settings file `~/.cam_config`, and both
groups `ANYONE`. Giving a users file with `-htpass` restricts viewing to
`USER` and configuration to `ADMIN`. Viewer and configuration groups other
than `any` only take effect together with a users file; otherwise they are
ignored with a warning.

## What the package does not do

The package holds no camera driver, no web server, no MJPEG streaming and
no saving of camera settings, and it installs no command. `VideoSource`,
`ObjectInformation` and `ObjectConfigurator` are interfaces to be
implemented; the front end modules only turn a command line into
settings.