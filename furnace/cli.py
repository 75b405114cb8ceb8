"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from furnace.component import MinecraftComponent
from furnace.instance import MinecraftInstance
from furnace.jsonfiles import read_json_file
from furnace.jsontext import json_to_string
from furnace.logs import get_log_manager
from furnace.manager import GAME_VERSION, InstanceManager, LaunchError
from furnace.system import executable_directory


def main(argv: Sequence[str] | None = None) -> int:
    """Start the launcher: set up a default instance and prepare its launch."""
    args = list(sys.argv[1:] if argv is None else argv)
    log = get_log_manager()
    log.success("Furnace initialized!")
    for position, argument in enumerate(args):
        log.info(f"Argument {position}: {argument}")

    base = executable_directory()

    game = MinecraftComponent(log)
    game.uid = "net.minecraft"
    game.version = GAME_VERSION

    lwjgl = MinecraftComponent(log)
    lwjgl.uid = "org.lwjgl3"
    lwjgl.version = "org.lwjgl3"

    with MinecraftInstance(log) as instance:
        instance.java_path = str(
            base / "launcher" / "java" / "java-runtime-delta" / "bin" / "java"
        )
        instance.components = [game, lwjgl]

        manager = InstanceManager(
            log,
            base / "launcher" / "libraries",
            base / "minecraft",
            base / "launcher" / "assets",
        )
        try:
            manager.run_instance(instance)
        except LaunchError as exc:
            log.error(str(exc))

        data = read_json_file(base / ".." / "test" / "file.json", log)
        field = data.get("test_field") if isinstance(data, dict) else None
        log.info(json_to_string(field))

    return 0


if __name__ == "__main__":
    sys.exit(main())