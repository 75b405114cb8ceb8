"""Version metadata records and Maven coordinate helpers."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AssetIndex:
    """Description of a game asset index."""

    id: int
    sha1: str
    size: int
    total_size: int
    url: str


@dataclass(frozen=True)
class Library:
    """A library with its downloadable artifact."""

    name: str
    artifact_sha1: str
    artifact_size: str
    artifact_url: str


@dataclass
class MetaData:
    """Version metadata: asset index, Java requirements and libraries."""

    asset_index: AssetIndex | None = None
    compatible_java_majors: list[int] = field(default_factory=list)
    compatible_java_name: str = ""
    libraries: list[Library] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.compatible_java_majors = list(self.compatible_java_majors)
        self.libraries = list(self.libraries)


def maven_to_jar_path(artifact: str) -> str:
    """Turn ``group:artifact:version[:classifier]`` into a relative jar path.

    Raises ValueError when the coordinate does not have three or four parts.
    """
    parts = artifact.split(":")
    if not 3 <= len(parts) <= 4:
        raise ValueError(f"not a Maven coordinate: {artifact!r}")
    group_id, artifact_id, version = parts[:3]
    classifier = parts[3] if len(parts) == 4 else ""

    file_name = f"{artifact_id}-{version}"
    if classifier:
        file_name += f"-{classifier}"
    file_name += ".jar"

    return "/".join((group_id.replace(".", "/"), artifact_id, version, file_name))