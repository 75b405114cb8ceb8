"""Assembling and launching game instances."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from furnace.instance import MinecraftInstance
from furnace.logs import LogManager, get_log_manager
from furnace.metadata import maven_to_jar_path

_NETTY_VERSION = "4.1.97.Final"
_LOG4J_VERSION = "2.22.1"
_JNA_VERSION = "5.14.0"
_LWJGL_VERSION = "3.3.3"
_LWJGL_MODULES = ("freetype", "glfw", "jemalloc", "", "openal", "opengl", "stb", "tinyfd")


def _lwjgl_entries(version: str) -> Iterator[tuple[str, ...]]:
    """Each LWJGL module, its Linux natives jar first."""
    for module in _LWJGL_MODULES:
        base = f"lwjgl-{module}" if module else "lwjgl"
        yield (f"{base}-natives-linux", version)
        yield (base, version)


def _netty_entries(version: str) -> Iterator[tuple[str, ...]]:
    for name in ("buffer", "codec", "common", "handler", "resolver", "transport-classes-epoll"):
        yield (f"netty-{name}", version)
    for classifier in ("linux-aarch_64", "linux-x86_64"):
        yield ("netty-transport-native-epoll", version, classifier)
    yield ("netty-transport-native-unix-common", version)
    yield ("netty-transport", version)


# (group, ((artifact, version[, classifier]), ...)) in classpath order.
_LIBRARY_SPEC: tuple[tuple[str, tuple[tuple[str, ...], ...]], ...] = (
    ("com.github.oshi", (("oshi-core", "6.4.10"),)),
    ("com.google.code.gson", (("gson", "2.10.1"),)),
    ("com.google.guava", (("failureaccess", "1.0.1"), ("guava", "32.1.2-jre"))),
    ("com.ibm.icu", (("icu4j", "73.2"),)),
    (
        "com.mojang",
        (
            ("authlib", "6.0.54"),
            ("blocklist", "1.0.10"),
            ("brigadier", "1.3.10"),
            ("datafixerupper", "8.0.16"),
            ("logging", "1.2.7"),
            ("patchy", "2.2.10"),
            ("text2speech", "1.17.9"),
        ),
    ),
    ("commons-codec", (("commons-codec", "1.16.0"),)),
    ("commons-io", (("commons-io", "2.15.1"),)),
    ("commons-logging", (("commons-logging", "1.2"),)),
    ("io.netty", tuple(_netty_entries(_NETTY_VERSION))),
    ("it.unimi.dsi", (("fastutil", "8.5.12"),)),
    ("net.java.dev.jna", (("jna-platform", _JNA_VERSION), ("jna", _JNA_VERSION))),
    ("net.sf.jopt-simple", (("jopt-simple", "5.0.4"),)),
    ("org.apache.commons", (("commons-compress", "1.26.0"), ("commons-lang3", "3.14.0"))),
    ("org.apache.httpcomponents", (("httpclient", "4.5.13"), ("httpcore", "4.4.16"))),
    (
        "org.apache.logging.log4j",
        tuple((name, _LOG4J_VERSION) for name in ("log4j-api", "log4j-core", "log4j-slf4j2-impl")),
    ),
    ("org.jcraft", (("jorbis", "0.0.17"),)),
    ("org.joml", (("joml", "1.10.5"),)),
    ("org.lz4", (("lz4-java", "1.8.0"),)),
    ("org.lwjgl", tuple(_lwjgl_entries(_LWJGL_VERSION))),
    ("org.slf4j", (("slf4j-api", "2.0.9"),)),
    ("com.mojang", (("minecraft", "1.21.1", "client"),)),
)

DEFAULT_LIBRARIES: tuple[str, ...] = tuple(
    ":".join((group, *entry)) for group, entries in _LIBRARY_SPEC for entry in entries
)

MAIN_CLASS = "net.minecraft.client.main.Main"
PLAYER_NAME = "Player"
GAME_VERSION = "1.21.1"
ASSET_INDEX = "26"


class LaunchError(Exception):
    """An instance could not be launched."""


class JavaPathMissing(LaunchError):
    """The instance has no Java executable configured."""

    def __init__(self) -> None:
        super().__init__("instance has no Java path")


class LibrariesMissing(LaunchError):
    """Some required library jars are not present on disk."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"{len(self.missing)} librar(y/ies) not found: {', '.join(self.missing)}")


class InstanceManager:
    """Builds launch commands for instances and keeps track of launched ones."""

    def __init__(
        self,
        log: LogManager | None = None,
        libraries_root: str | os.PathLike[str] = "launcher/libraries",
        game_dir: str | os.PathLike[str] = "minecraft",
        assets_dir: str | os.PathLike[str] = "launcher/assets",
    ) -> None:
        self.log = log if log is not None else get_log_manager()
        self.libraries_root = os.fspath(libraries_root)
        self.game_dir = os.fspath(game_dir)
        self.assets_dir = os.fspath(assets_dir)
        self.libraries: list[str] = list(DEFAULT_LIBRARIES)
        self._launched: list[MinecraftInstance] = []

    @property
    def launched(self) -> list[MinecraftInstance]:
        """Instances launched and not yet stopped."""
        return list(self._launched)

    def _library_path(self, library: str) -> str:
        return f"{self.libraries_root}/{maven_to_jar_path(library)}"

    def _missing_libraries(self, libraries: Iterable[str]) -> list[str]:
        self.log.separator()
        self.log.info("Validating libraries...")
        missing = []
        for number, library in enumerate(libraries, start=1):
            local_path = maven_to_jar_path(library)
            if os.path.exists(f"{self.libraries_root}/{local_path}"):
                self.log.success(f"{number}: {local_path} | OK")
            else:
                self.log.error(f"{number}: {local_path} | Not Found")
                missing.append(local_path)
        self.log.separator()
        return missing

    def validate_libraries(self, libraries: Iterable[str]) -> bool:
        """Check that every library jar exists, logging one line per library."""
        return not self._missing_libraries(libraries)

    def libraries_classpath(self, libraries: Iterable[str]) -> str:
        """Join the absolute jar paths of ``libraries`` into a classpath."""
        return ":".join(self._library_path(library) for library in libraries)

    def _game_arguments(self) -> str:
        arguments = (
            ("--username", PLAYER_NAME),
            ("--version", GAME_VERSION),
            ("--accessToken", "0"),
            ("--userProperties", "{}"),
            ("--gameDir", self.game_dir),
            ("--assetsDir", self.assets_dir),
            ("--assetIndex", ASSET_INDEX),
        )
        return "".join(f" {flag} {value}" for flag, value in arguments)

    def build_command(self, instance: MinecraftInstance) -> str:
        """Return the command line that launches ``instance``.

        Raises JavaPathMissing if no Java path is set and LibrariesMissing
        if a library jar is absent.
        """
        if instance.java_path is None:
            raise JavaPathMissing()
        prefix = f"{instance.java_path} "
        if instance.jvm_args is not None:
            prefix += f"{instance.jvm_args} "

        missing = self._missing_libraries(self.libraries)
        if missing:
            raise LibrariesMissing(missing)

        classpath = self.libraries_classpath(self.libraries)
        return f"{prefix}-cp {classpath} {MAIN_CLASS}{self._game_arguments()}"

    def run_instance(self, instance: MinecraftInstance) -> str:
        """Prepare ``instance`` for launch, log its command and return it."""
        command = self.build_command(instance)
        self.log.info(command)
        if not any(launched is instance for launched in self._launched):
            self._launched.append(instance)
        return command

    def stop_instance(self, instance: MinecraftInstance) -> bool:
        """Forget a launched instance; return whether it had been launched."""
        for position, launched in enumerate(self._launched):
            if launched is instance:
                del self._launched[position]
                return True
        return False