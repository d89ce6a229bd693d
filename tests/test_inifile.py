import pytest

from lightmvc.inifile import IniFile, Value

SAMPLE = """
# server settings
[server]
ip = 127.0.0.1
port = 8080
=ignored

[ debug ]
enabled = true
ratio = 0.25
"""


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "server.ini"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


def test_value_conversions():
    assert str(Value(True)) == "true"
    assert str(Value(False)) == "false"
    assert int(Value(8080)) == 8080
    assert float(Value(2.5)) == 2.5
    assert int(Value("abc")) == 0
    assert bool(Value("yes")) is False


def test_load_reads_sections_and_keys(sample_file):
    ini = IniFile(str(sample_file))
    assert str(ini.get("server", "ip")) == "127.0.0.1"
    assert int(ini["server"]["port"]) == 8080
    assert bool(ini.get("debug", "enabled")) is True
    assert float(ini.get("debug", "ratio")) == 0.25


def test_comments_and_empty_keys_skipped(sample_file):
    ini = IniFile(str(sample_file))
    assert ini.has("server")
    assert not ini.has("server", "")
    assert not ini.has("# server settings")


def test_missing_key_reads_empty(sample_file):
    ini = IniFile(str(sample_file))
    assert int(ini["server"]["threads"]) == 0
    assert str(ini.get("other", "key")) == ""


def test_key_outside_section_is_error(tmp_path):
    path = tmp_path / "bad.ini"
    path.write_text("key = value\n", encoding="utf-8")
    with pytest.raises(ValueError):
        IniFile(str(path))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        IniFile(str(tmp_path / "absent.ini"))


def test_set_has_remove():
    ini = IniFile()
    ini.set("a", "x", 3)
    ini.set("a", "y", True)
    assert ini.has("a", "x")
    ini.remove("a", "x")
    assert not ini.has("a", "x")
    assert ini.has("a", "y")
    ini.remove("a")
    assert not ini.has("a")


def test_save_format_and_round_trip(tmp_path):
    ini = IniFile()
    ini.set("server", "port", 8080)
    ini.set("server", "ip", "127.0.0.1")
    path = tmp_path / "out.ini"
    ini.save(str(path))
    assert path.read_text(encoding="utf-8") == "[server]\nip = 127.0.0.1\nport = 8080\n\n"
    again = IniFile(str(path))
    assert again.get("server", "port") == "8080"


def test_show_prints_sorted(capsys):
    ini = IniFile()
    ini.set("b", "k", "v")
    ini.set("a", "k", "v")
    ini.show()
    out = capsys.readouterr().out
    assert out.index("[a]") < out.index("[b]")


def test_clear():
    ini = IniFile()
    ini.set("a", "k", "v")
    ini.clear()
    assert not ini.has("a")