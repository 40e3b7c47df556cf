"""Video source interface and listeners of its events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class _Uncopyable:
    """Mixin that forbids copying of instances."""

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")

    def __reduce_ex__(self, protocol):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")


class VideoSourceListener(ABC):
    """Receives frames and errors from a video source."""

    @abstractmethod
    def on_new_image(self, image: Any) -> None:
        """Handle a newly received video frame."""

    @abstractmethod
    def on_error(self, message: str, fatal: bool) -> None:
        """Handle an error reported by the video source."""


class VideoSourceListenerChain(VideoSourceListener):
    """Forwards every event to each listener added, in order of addition."""

    def __init__(self) -> None:
        self._chain: list[VideoSourceListener] = []

    def on_new_image(self, image: Any) -> None:
        for listener in self._chain:
            listener.on_new_image(image)

    def on_error(self, message: str, fatal: bool) -> None:
        for listener in self._chain:
            listener.on_error(message, fatal)

    def add(self, listener: VideoSourceListener | None) -> None:
        """Append a listener; None is ignored."""
        if listener is not None:
            self._chain.append(listener)

    def clear(self) -> None:
        """Remove all listeners."""
        self._chain.clear()

    def __len__(self) -> int:
        return len(self._chain)


class VideoSource(_Uncopyable, ABC):
    """A source that continuously provides video frames to a listener."""

    @abstractmethod
    def start(self) -> bool:
        """Start providing frames; return whether starting succeeded."""

    @abstractmethod
    def signal_to_stop(self) -> None:
        """Ask the source to stop and clean up."""

    @abstractmethod
    def wait_for_stop(self) -> None:
        """Block until the source has stopped."""

    @abstractmethod
    def is_running(self) -> bool:
        """Return whether the source is still running."""

    @abstractmethod
    def frames_received(self) -> int:
        """Return the number of frames received since start."""

    @abstractmethod
    def set_listener(
        self, listener: VideoSourceListener | None
    ) -> VideoSourceListener | None:
        """Set the listener and return the previous one."""