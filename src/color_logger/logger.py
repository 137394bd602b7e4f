"""Colorized console logger.

:class:`ColorLogger` formats messages with ANSI escape codes and writes them at INFO
level to a :class:`~color_logger.log_sink.LogSink`. Most helpers are gated by the
``verbose`` flag; errors, the startup banner and explicitly colored :meth:`ColorLogger.log`
calls are not.
"""

from __future__ import annotations

from .colors import RESET, Background, Foreground, clamp_channel, rgb_colors, rgb_foreground
from .config import LoggerConfig
from .log_sink import LogSink, StdLoggingSink

PREFIX = ">>> "

BANNER_COLORS = rgb_colors((255, 255, 0), (255, 0, 127))


class ColorLogger:
    """Named logger that prepends ANSI colors to its messages.

    :param name: Subsystem name; also the underlying :mod:`logging` logger name when
        ``sink`` is omitted.
    :param verbose: Emit verbose-gated messages. Fixed for the lifetime of the instance.
    :param sink: Target sink; defaults to :class:`~color_logger.log_sink.StdLoggingSink`.
    :param clamp_rgb: Clamp RGB components into ``[0, 255]``. Off by default, in which
        case components are written as given.
    """

    def __init__(
        self,
        name: str,
        verbose: bool = False,
        sink: LogSink | None = None,
        clamp_rgb: bool = False,
    ) -> None:
        self._name = name
        self._verbose = bool(verbose)
        self._sink = sink if sink is not None else StdLoggingSink(name)
        self._clamp_rgb = clamp_rgb

    @classmethod
    def from_config(cls, config: LoggerConfig, sink: LogSink | None = None) -> "ColorLogger":
        """Build a logger from a :class:`~color_logger.config.LoggerConfig`."""
        return cls(config.name, verbose=config.verbose, sink=sink, clamp_rgb=config.clamp_rgb)

    @property
    def name(self) -> str:
        return self._name

    @property
    def verbose(self) -> bool:
        return self._verbose

    @property
    def sink(self) -> LogSink:
        return self._sink

    def log_startup_banner(self) -> None:
        """Write the initialization banner, yellow on pink. Always emitted.

        The banner text is ``>>> Initializing <name>``, so it carries this logger's
        name rather than being one fixed string for every logger.
        """
        self._sink.info(f"{BANNER_COLORS}{PREFIX}Initializing {self._name}{RESET}")

    def log(self, message: str, foreground: str | None = None, background: str | None = None) -> None:
        """Write ``message`` in color.

        Without colors the message is bright magenta and only written when verbose.
        With an explicit ``foreground`` (and optional ``background``) it is always
        written.

        :param message: Message text.
        :param foreground: Text color escape, e.g. a :class:`~color_logger.colors.Foreground`.
        :param background: Background color escape, e.g. a :class:`~color_logger.colors.Background`.
        :raises TypeError: If ``background`` is given without ``foreground``.
        """
        if foreground is None and background is not None:
            raise TypeError("background requires a foreground")
        if foreground is None:
            if self._verbose:
                self._emit(str(Foreground.BRIGHT_MAGENTA), message)
            return
        if background is None:
            self._emit(str(foreground), message)
        else:
            self._emit(f"{background}{foreground}", message)

    def log_error(self, message: str) -> None:
        """Write an error, black on bright red. Never gated.

        :param message: Message text.
        """
        self.log(message, Foreground.BLACK, Background.BRIGHT_RED)

    def log_warning(self, message: str) -> None:
        """Write a warning, black on bright yellow, when verbose.

        :param message: Message text.
        """
        if self._verbose:
            self.log(message, Foreground.BLACK, Background.BRIGHT_YELLOW)

    def log_plain(self, message: str) -> None:
        """Write ``message`` without colors when verbose."""
        if self._verbose:
            self._sink.info(f"{PREFIX}{message}")

    def log_rgb(self, message: str, r: int, g: int, b: int) -> None:
        """Write ``message`` with a 24-bit text color when verbose.

        :param message: Message text.
        :param r: Red component (0-255).
        :param g: Green component (0-255).
        :param b: Blue component (0-255).
        """
        if self._verbose:
            self._emit(rgb_foreground(*self._channels(r, g, b)), message)

    def log_back_rgb(
        self,
        message: str,
        rf: int,
        gf: int,
        bf: int,
        rb: int,
        gb: int,
        bb: int,
    ) -> None:
        """Write ``message`` with 24-bit text and background colors when verbose.

        :param message: Message text.
        :param rf: Red component of the text color (0-255).
        :param gf: Green component of the text color (0-255).
        :param bf: Blue component of the text color (0-255).
        :param rb: Red component of the background color (0-255).
        :param gb: Green component of the background color (0-255).
        :param bb: Blue component of the background color (0-255).
        """
        if self._verbose:
            colors = rgb_colors(self._channels(rf, gf, bf), self._channels(rb, gb, bb))
            self._emit(colors, message)

    def _channels(self, r: int, g: int, b: int) -> tuple[int, int, int]:
        if self._clamp_rgb:
            return clamp_channel(r), clamp_channel(g), clamp_channel(b)
        return r, g, b

    def _emit(self, colors: str, message: str) -> None:
        self._sink.info(f"{colors}{PREFIX}{message}{RESET}")

    def __repr__(self) -> str:
        return f"ColorLogger(name={self._name!r}, verbose={self._verbose})"
