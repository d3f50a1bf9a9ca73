import io

import pytest

from motionkit.console import (
    RED,
    RESET,
    Console,
    Level,
    LogLocation,
    parse_level,
)


def _console():
    out, err = io.StringIO(), io.StringIO()
    return Console(stdout=out, stderr=err), out, err


def test_parse_level_known_and_unknown():
    assert parse_level("WARN") is Level.WARN
    assert parse_level("DEBUG") is Level.DEBUG
    assert parse_level("warn") is None
    assert parse_level("VERBOSE") is None


def test_logger_hierarchy_and_inheritance():
    console, _, _ = _console()
    child = console.get_logger("planner.search")
    parent = console.get_logger("planner")
    root = console.get_logger("")
    assert child.parent is parent
    assert parent.parent is root
    assert root.parent is None
    assert child.level == root.level
    assert console.get_logger("planner.search") is child


def test_child_created_after_parent_change_inherits():
    console, _, _ = _console()
    console.get_logger("planner").level = Level.ERROR
    assert console.get_logger("planner.search").level is Level.ERROR


def test_emit_info_goes_to_stdout():
    console, out, err = _console()
    console.emit(Level.INFO, "file.cpp", 3, "hello")
    assert out.getvalue() == "[INFO]  hello\n"
    assert err.getvalue() == ""


def test_emit_error_goes_to_stderr():
    console, out, err = _console()
    console.emit(Level.ERROR, "file.cpp", 3, "boom")
    assert err.getvalue() == "[ERROR] boom\n"
    assert out.getvalue() == ""


def test_emit_colored():
    console, _, err = _console()
    console.colored = True
    console.emit(Level.FATAL, "file.cpp", 3, "bad")
    assert err.getvalue() == RED + "[FATAL] bad" + RESET + "\n"


def test_emit_shows_location_basename():
    console, out, _ = _console()
    console.show_locations = True
    console.emit(Level.DEBUG, "dir\\file.cpp", 12, "msg")
    assert out.getvalue() == "[DEBUG] msg [file.cpp:12]\n"


def test_initialize_from_config(tmp_path):
    cfg = tmp_path / "console.cfg"
    cfg.write_text(
        "# comment\n"
        "[format]\n"
        "colored = true\n"
        "show_locations = no\n"
        "[planner]\n"
        "search = WARN\n"
        "heuristic = NONSENSE\n"
    )
    console, _, _ = _console()
    console.initialize(cfg)
    assert console.initialized
    assert console.colored is True
    assert console.show_locations is False
    assert console.get_logger("planner.search").level is Level.WARN
    assert console.get_logger("planner.heuristic").level is Level.INFO
    assert console.get_logger("planner.search.deep").level is Level.WARN


def test_initialize_uses_environment(tmp_path, monkeypatch):
    cfg = tmp_path / "env.cfg"
    cfg.write_text("[format]\nunbuffered = 1\n")
    monkeypatch.setenv("SMPL_CONSOLE_CONFIG_FILE", str(cfg))
    console, _, _ = _console()
    console.initialize()
    assert console.unbuffered is True


def test_initialize_runs_once(tmp_path):
    first = tmp_path / "a.cfg"
    first.write_text("[format]\ncolored = true\n")
    second = tmp_path / "b.cfg"
    second.write_text("[format]\ncolored = false\n")
    console, _, _ = _console()
    console.initialize(first)
    console.initialize(second)
    assert console.colored is True


def test_initialize_rejects_bad_boolean(tmp_path):
    cfg = tmp_path / "bad.cfg"
    cfg.write_text("[format]\ncolored = maybe\n")
    console, _, _ = _console()
    with pytest.raises(ValueError):
        console.initialize(cfg)
    assert console.initialized is False


def test_initialize_missing_file(tmp_path):
    console, _, _ = _console()
    with pytest.raises(FileNotFoundError):
        console.initialize(tmp_path / "absent.cfg")


def test_log_location_enabled_by_level():
    console, _, _ = _console()
    console.get_logger("x").level = Level.WARN
    low = LogLocation()
    high = LogLocation()
    console.init_log_location(low, "x", Level.INFO)
    console.init_log_location(high, "x", Level.ERROR)
    assert low.enabled is False
    assert high.enabled is True
    assert low.logger is console.get_logger("x")


def test_log_location_initialized_once():
    console, _, _ = _console()
    loc = LogLocation()
    console.init_log_location(loc, "a", Level.DEBUG)
    console.init_log_location(loc, "b", Level.FATAL)
    assert loc.level is Level.DEBUG
    assert loc.logger is console.get_logger("a")