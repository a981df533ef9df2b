"""Base class for windowed OpenGL applications."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class ApplicationError(RuntimeError):
    """Raised when the window or its OpenGL context cannot be created."""


class Application(ABC):
    """Owns a window; subclasses provide the main loop in :meth:`run`."""

    def __init__(self, name: str, version: str, screen_width: int, screen_height: int) -> None:
        self.name = name
        self.version = version
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.window: Optional[Any] = None

    def _create_window(self) -> Any:
        import pyglet

        config = pyglet.gl.Config(
            major_version=4, minor_version=3, forward_compatible=True, double_buffer=True
        )
        return pyglet.window.Window(
            self.screen_width,
            self.screen_height,
            caption=self.name,
            resizable=False,
            config=config,
        )

    def init(self) -> None:
        """Create the window and make its OpenGL context current."""
        try:
            window = self._create_window()
        except Exception as exc:  # any windowing or context failure
            raise ApplicationError(f"cannot create window: {exc}") from exc
        if window is None:
            raise ApplicationError("cannot create window")
        self.window = window

    @abstractmethod
    def run(self) -> None:
        """Run the application's main loop."""

    def close(self) -> None:
        if self.window is not None:
            self.window.close()
            self.window = None

    def __enter__(self) -> "Application":
        self.init()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()