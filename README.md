# furnace

The core of a Minecraft launcher. It models a game instance, which is a Java
runtime plus the components the game is made of. It checks that each Maven
library the client needs is present under a local libraries directory, and it
builds the Java command line that would start the client. Every step is
reported to the console with coloured tags.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Command line

```
furnace [ARGS...]
```

The command does the following, in order:

1. It logs `Furnace initialized!` and each argument.
2. It creates two components, `net.minecraft` at version `1.21.1` and
   `org.lwjgl3`.
3. It creates an instance with those two components. The instance's Java path
   is `launcher/java/java-runtime-delta/bin/java` inside the program's
   directory.
4. It validates the libraries under `launcher/libraries` in the same
   directory. If the libraries are all present, it logs the launch command.
   If they are not, it logs the error.
5. It reads `../test/file.json` relative to the program's directory and logs
   that file's `test_field` member as compact JSON. If the member is absent,
   it logs `null`.

The program's directory is the directory that holds the file named by
`sys.argv[0]`. The command always exits with status 0.

## Library use

### Components and instances

```python
from furnace.logs import get_log_manager
from furnace.component import MinecraftComponent
from furnace.instance import MinecraftInstance

log = get_log_manager()

game = MinecraftComponent(log)
game.uid = "net.minecraft"
game.version = "1.21.1"
print(game.describe())   # {uuid: net.minecraft, version: 1.21.1}
print(game.to_json())    # {'uid': 'net.minecraft', 'version': '1.21.1'}

with MinecraftInstance(log) as instance:
    instance.java_path = "/opt/java/bin/java"
    instance.jvm_args = "-Xmx2G"
    instance.components = [game]
```

An instance has four Java settings: `java_path`, `java_version`,
`java_vendor` and `jvm_args`. Each one is `None` until it is set.
`has_components` tells whether the instance has any components.

The following are all logged:

- creating a component or an instance;
- each assignment, as a JSON line;
- `close()`, which is also called on leaving a `with` block.

### Launch commands

```python
from furnace.manager import InstanceManager, LaunchError

manager = InstanceManager(
    log,
    libraries_root="launcher/libraries",
    game_dir="minecraft",
    assets_dir="launcher/assets",
)
try:
    command = manager.run_instance(instance)
except LaunchError as exc:
    print("cannot launch:", exc)
```

`InstanceManager.libraries` holds the Maven coordinates the client needs. It
starts as `furnace.manager.DEFAULT_LIBRARIES`.

`build_command(instance)` validates those libraries and returns the command
line. It runs the main class `net.minecraft.client.main.Main` with player
`Player`, version `1.21.1` and asset index `26`. It raises these errors:

- `JavaPathMissing` if the instance has no Java path;
- `LibrariesMissing` if any jar is absent. Its `missing` attribute lists the
  relative paths of the absent jars.

Both errors are subclasses of `LaunchError`.

`run_instance(instance)` builds the command, logs it, records the instance as
launched and returns the command. `stop_instance(instance)` removes the
instance from `launched`. It returns whether the instance was there.

`validate_libraries(libraries)` logs one `OK` or `Not Found` line for each
library and returns whether all of them exist.

`libraries_classpath(libraries)` joins the jar paths with `:`.

### Metadata and Maven coordinates

```python
from furnace.metadata import maven_to_jar_path

maven_to_jar_path("org.lwjgl:lwjgl:3.3.3")
# 'org/lwjgl/lwjgl/3.3.3/lwjgl-3.3.3.jar'
maven_to_jar_path("io.netty:netty-transport-native-epoll:4.1.97.Final:linux-x86_64")
# 'io/netty/netty-transport-native-epoll/4.1.97.Final/netty-transport-native-epoll-4.1.97.Final-linux-x86_64.jar'
```

A coordinate must have three or four parts. Any other count raises
`ValueError`.

`furnace.metadata` also defines three plain records for version metadata:

- `AssetIndex`;
- `Library`;
- `MetaData`, which holds an asset index, the compatible Java majors and
  name, and a list of libraries.

### JSON files

`furnace.jsonfiles.read_json_file(path, log)` returns the parsed document. It
never raises. If the file cannot be used, it logs the problem and returns
`{"read_json_status": ...}`, where the value is one of:

- `file_not_exists`;
- `file_read_error`;
- `file_parse_error`.

`furnace.jsontext.json_to_string(value)` returns compact JSON with the keys
sorted.

### Logging and colours

`furnace.logs.LogManager(stream)` writes lines to `stream`, or to standard
output when no stream is given. It has these methods:

- `info`, `warn`, `error` and `success`, which write lines tagged `[Info]`,
  `[Warning]`, `[Error]` and `[Success]`;
- `separator`, which writes a blank line, but never two in a row.

`get_log_manager()` returns one shared instance.

```python
from furnace.colors import Color, colorize
print(colorize("ready", Color.BOLD, Color.FG_GREEN))
```

## What it does not do

- It builds and logs the launch command but never starts Java or the game.
- It does not download libraries, assets or Java runtimes. It only checks
  that the library jars are present.
- It does not fetch or parse version manifests. The records in
  `furnace.metadata` are not filled from any file.
- The library list, the player name, the game version and the asset index
  are fixed values. There are no accounts and no authentication.