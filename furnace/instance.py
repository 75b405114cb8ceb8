"""A configured game instance: its components and Java settings."""

from __future__ import annotations

from collections.abc import Iterable

from furnace.component import MinecraftComponent
from furnace.logs import LogManager, get_log_manager


class MinecraftInstance:
    """A game instance with its components and Java runtime settings.

    Each Java setting is ``None`` until it is assigned. Every change is
    reported to the log.
    """

    def __init__(self, log: LogManager | None = None) -> None:
        self._log = log if log is not None else get_log_manager()
        self._components: list[MinecraftComponent] = []
        self._java_path: str | None = None
        self._java_version: str | None = None
        self._java_vendor: str | None = None
        self._jvm_args: str | None = None
        self._log.separator()
        self._log.object_created(self)

    @property
    def log(self) -> LogManager:
        return self._log

    @property
    def components(self) -> list[MinecraftComponent]:
        """A copy of the instance's components."""
        return list(self._components)

    @components.setter
    def components(self, value: Iterable[MinecraftComponent]) -> None:
        self._components = list(value)
        # An empty component list is reported as null, not as an empty array.
        described = [component.to_json() for component in self._components] or None
        self._log.value_changed({"components": described}, self)

    @property
    def has_components(self) -> bool:
        return bool(self._components)

    @property
    def java_path(self) -> str | None:
        return self._java_path

    @java_path.setter
    def java_path(self, value: str) -> None:
        self._java_path = value
        self._log.value_changed({"java_path": value}, self)

    @property
    def java_version(self) -> str | None:
        return self._java_version

    @java_version.setter
    def java_version(self, value: str) -> None:
        self._java_version = value
        self._log.value_changed({"java_version": value}, self)

    @property
    def java_vendor(self) -> str | None:
        return self._java_vendor

    @java_vendor.setter
    def java_vendor(self, value: str) -> None:
        self._java_vendor = value
        self._log.value_changed({"java_vendor": value}, self)

    @property
    def jvm_args(self) -> str | None:
        return self._jvm_args

    @jvm_args.setter
    def jvm_args(self, value: str) -> None:
        self._jvm_args = value
        self._log.value_changed({"jwm_args": value}, self)

    def close(self) -> None:
        """Report that the instance is no longer in use."""
        self._log.separator()
        self._log.object_destroyed(self)

    def __enter__(self) -> MinecraftInstance:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()