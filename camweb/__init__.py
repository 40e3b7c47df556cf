"""Property sets, video source interfaces and command line settings for streaming a camera."""

__version__ = "1.1.0"