"""Game components: a uid with a version, such as the game itself or a library set."""

from __future__ import annotations

from typing import Any

from furnace.logs import LogManager, get_log_manager


class MinecraftComponent:
    """A named, versioned component of a game instance.

    Creation, changes and closing are reported to the log.
    """

    def __init__(self, log: LogManager | None = None) -> None:
        self._log = log if log is not None else get_log_manager()
        self._uid = ""
        self._version = ""
        self._log.separator()
        self._log.object_created(self)

    @property
    def log(self) -> LogManager:
        return self._log

    @property
    def uid(self) -> str:
        """Identifier of the component, e.g. ``net.minecraft``."""
        return self._uid

    @uid.setter
    def uid(self, value: str) -> None:
        self._uid = value
        self._log.value_changed({"uid": self._uid}, self)

    @property
    def version(self) -> str:
        """Version string of the component."""
        return self._version

    @version.setter
    def version(self, value: str) -> None:
        self._version = value
        self._log.value_changed({"version": self._version}, self)

    def to_json(self) -> dict[str, Any]:
        """Return the component as a JSON-ready mapping."""
        return {
            "uid": "null" if self._uid is None else self._uid,
            "version": "null" if self._version is None else self._version,
        }

    def describe(self) -> str:
        """Return a short human-readable description."""
        return "{" + f"uuid: {self._uid}, version: {self._version}" + "}"

    def close(self) -> None:
        """Report that the component is no longer in use."""
        self._log.separator()
        self._log.object_destroyed(self)

    def __enter__(self) -> MinecraftComponent:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"MinecraftComponent(uid={self._uid!r}, version={self._version!r})"