import io

import pytest

from furnace.component import MinecraftComponent
from furnace.instance import MinecraftInstance
from furnace.logs import LogManager


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def log(stream):
    return LogManager(stream)


def _component(log, uid, version):
    component = MinecraftComponent(log)
    component.uid = uid
    component.version = version
    return component


def test_creation_is_logged(log, stream):
    instance = MinecraftInstance(log)
    assert log.latest_log.endswith(
        f"Create object: MinecraftInstance, with memory address: {hex(id(instance))}"
    )


def test_settings_start_unset(log):
    instance = MinecraftInstance(log)
    assert instance.java_path is None
    assert instance.java_version is None
    assert instance.java_vendor is None
    assert instance.jvm_args is None
    assert instance.components == []
    assert instance.has_components is False


def test_java_path_set_and_logged(log):
    instance = MinecraftInstance(log)
    instance.java_path = "/opt/java/bin/java"
    assert instance.java_path == "/opt/java/bin/java"
    assert log.latest_log.endswith('changed to: {"java_path":"/opt/java/bin/java"}')


def test_java_version_and_vendor(log):
    instance = MinecraftInstance(log)
    instance.java_version = "21"
    assert '{"java_version":"21"}' in log.latest_log
    instance.java_vendor = "vendor"
    assert '{"java_vendor":"vendor"}' in log.latest_log
    assert (instance.java_version, instance.java_vendor) == ("21", "vendor")


def test_jvm_args_logged_under_source_key(log):
    instance = MinecraftInstance(log)
    instance.jvm_args = "-Xmx2G"
    assert instance.jvm_args == "-Xmx2G"
    assert '{"jwm_args":"-Xmx2G"}' in log.latest_log


def test_components_are_copied(log):
    instance = MinecraftInstance(log)
    first = _component(log, "net.minecraft", "1.21.1")
    given = [first]
    instance.components = given
    given.append(_component(log, "org.lwjgl3", "3.3.3"))
    assert instance.components == [first]
    returned = instance.components
    returned.clear()
    assert instance.components == [first]
    assert instance.has_components is True


def test_components_change_is_logged(log):
    instance = MinecraftInstance(log)
    instance.components = [
        _component(log, "net.minecraft", "1.21.1"),
        _component(log, "org.lwjgl3", "3.3.3"),
    ]
    assert '"uid":"net.minecraft"' in log.latest_log
    assert '"uid":"org.lwjgl3"' in log.latest_log
    assert hex(id(instance)) in log.latest_log


def test_empty_components_logged_as_null(log):
    instance = MinecraftInstance(log)
    instance.components = []
    assert log.latest_log.endswith('changed to: {"components":null}')


def test_close_logs_destruction(log):
    with MinecraftInstance(log):
        pass
    assert "Destruct object: MinecraftInstance" in log.latest_log