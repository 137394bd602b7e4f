"""Configuration helpers.

The main responsibility of this module is answering "is the host running in a
development environment" and providing a small immutable configuration object used
by :meth:`~color_logger.logger.ColorLogger.from_config`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping

DEVELOPMENT_ENV_VAR = "COLOR_LOGGER_DEVELOPMENT"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def is_development_environment(environ: Mapping[str, str] | None = None) -> bool:
    """Return whether the host runtime is a development environment.

    Reads :data:`DEVELOPMENT_ENV_VAR`; ``1``, ``true``, ``yes`` and ``on`` (any case)
    count as true, everything else (including unset) as false.

    :param environ: Environment mapping; defaults to :data:`os.environ`.
    :returns: ``True`` in development.
    """
    env = os.environ if environ is None else environ
    return env.get(DEVELOPMENT_ENV_VAR, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class LoggerConfig:
    """Configuration for :class:`~color_logger.logger.ColorLogger`.

    :param name: Logger name handed to the underlying logging facility.
    :param verbose: Whether verbose-gated messages are emitted.
    :param clamp_rgb: Clamp RGB components into ``[0, 255]`` before writing them.
    """
    name: str
    verbose: bool = False
    clamp_rgb: bool = False

    @classmethod
    def default(cls, name: str, environ: Mapping[str, str] | None = None) -> "LoggerConfig":
        """Create a config whose ``verbose`` flag follows the host environment.

        The host predicate is consulted once, here.

        :param name: Logger name.
        :param environ: Optional environment mapping, see :func:`is_development_environment`.
        :returns: A default configuration instance.
        """
        return cls(name=name, verbose=is_development_environment(environ))
