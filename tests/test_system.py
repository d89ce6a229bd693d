import os
import resource
import sys
from unittest import mock

from lightmvc.system import System


def test_explicit_root_path(tmp_path):
    assert System(str(tmp_path)).get_root_path() == str(tmp_path)


def test_default_root_is_program_directory(tmp_path):
    with mock.patch.object(sys, "argv", [str(tmp_path / "prog")]):
        assert System().get_root_path() == os.path.realpath(tmp_path)


def test_init_creates_log_directory_and_sets_limits(tmp_path):
    with mock.patch("resource.setrlimit") as setrlimit:
        System(str(tmp_path)).init()
    assert (tmp_path / "log").is_dir()
    data_calls = [c for c in setrlimit.call_args_list if c.args[0] == resource.RLIMIT_DATA]
    assert len(data_calls) == 1
    assert data_calls[0].args[1][0] == 768000000


def test_init_keeps_existing_log_directory(tmp_path):
    (tmp_path / "log").mkdir()
    (tmp_path / "log" / "keep.txt").write_text("x", encoding="utf-8")
    with mock.patch("resource.setrlimit"):
        System(str(tmp_path)).init()
    assert (tmp_path / "log" / "keep.txt").read_text(encoding="utf-8") == "x"