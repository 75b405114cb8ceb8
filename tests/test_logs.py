import io

from furnace.colors import Color, colorize
from furnace.logs import LogManager, get_log_manager


def make():
    stream = io.StringIO()
    return LogManager(stream), stream


def test_info_line():
    log, stream = make()
    log.info("hi")
    assert stream.getvalue() == "[Info] hi\n"
    assert log.latest_log == "[Info] hi"


def test_warn_line():
    log, stream = make()
    log.warn("careful")
    assert stream.getvalue() == colorize("[Warning]", Color.FG_YELLOW) + " careful\n"


def test_error_line():
    log, stream = make()
    log.error("boom")
    assert stream.getvalue() == colorize("[Error]", Color.FG_RED) + " boom\n"


def test_success_line():
    log, stream = make()
    log.success("Furnace initialized!")
    assert stream.getvalue() == colorize("[Success]", Color.FG_GREEN) + " Furnace initialized!\n"


def test_separator_not_repeated():
    log, stream = make()
    log.info("a")
    log.separator()
    log.separator()
    log.info("b")
    assert stream.getvalue() == "[Info] a\n\n[Info] b\n"


def test_first_separator_printed():
    log, stream = make()
    log.separator()
    assert stream.getvalue() == "\n"


class Widget:
    pass


def test_object_created_mentions_type_and_address():
    log, stream = make()
    obj = Widget()
    log.object_created(obj)
    out = stream.getvalue()
    assert "Create object: Widget, with memory address: " + hex(id(obj)) in out
    assert out.startswith(colorize("[Success]", Color.FG_GREEN))


def test_object_destroyed_mentions_type_and_address():
    log, stream = make()
    obj = Widget()
    log.object_destroyed(obj)
    assert "Destruct object: Widget, with memory address: " + hex(id(obj)) in stream.getvalue()


def test_value_changed():
    log, stream = make()
    obj = Widget()
    log.value_changed({"uid": "net.minecraft"}, obj)
    assert stream.getvalue() == (
        f"[Info] Value of object: {hex(id(obj))}, changed to: " + '{"uid":"net.minecraft"}\n'
    )


def test_default_stream_is_stdout(capsys):
    log = LogManager()
    log.info("to stdout")
    assert capsys.readouterr().out == "[Info] to stdout\n"


def test_shared_manager_is_single(capsys):
    first = get_log_manager()
    get_log_manager().info("shared message")
    assert first.latest_log == "[Info] shared message"