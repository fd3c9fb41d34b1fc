"""Tests for writing generated scripts."""

import stat
from pathlib import Path

import pytest

from compbench.emitter import SCRIPT_MODE, emit
from compbench.errors import ScriptPermissionError, WriteError


def mode_of(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


class TestEmit:
    def test_writes_executable_script(self, tmp_path):
        path = emit(tmp_path / "autogen-test.bash", "#!/usr/bin/env bash\necho hi\n")
        assert path == tmp_path / "autogen-test.bash"
        assert path.read_text() == "#!/usr/bin/env bash\necho hi\n"
        assert mode_of(path) == SCRIPT_MODE == 0o755

    def test_accepts_str_path(self, tmp_path):
        path = emit(str(tmp_path / "x.bash"), "echo\n")
        assert isinstance(path, Path)
        assert path.exists()

    def test_overwrites_existing(self, tmp_path):
        target = tmp_path / "autogen-test.bash"
        emit(target, "first run with a much longer body\n")
        emit(target, "second\n")
        assert target.read_text() == "second\n"

    def test_resets_mode_of_existing_file(self, tmp_path):
        target = tmp_path / "autogen-test.bash"
        target.write_text("old\n")
        target.chmod(0o600)
        emit(target, "new\n")
        assert mode_of(target) == 0o755

    def test_custom_mode(self, tmp_path):
        path = emit(tmp_path / "x.bash", "echo\n", mode=0o700)
        assert mode_of(path) == 0o700

    def test_write_error(self, tmp_path):
        with pytest.raises(WriteError) as exc_info:
            emit(tmp_path / "missing" / "x.bash", "echo\n")
        assert isinstance(exc_info.value, OSError)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_write_error_on_directory(self, tmp_path):
        with pytest.raises(WriteError):
            emit(tmp_path, "echo\n")

    def test_permission_error_on_chmod(self, tmp_path, monkeypatch):
        def deny(self, mode):
            raise PermissionError("Operation not permitted")

        monkeypatch.setattr(Path, "chmod", deny)
        with pytest.raises(ScriptPermissionError) as exc_info:
            emit(tmp_path / "x.bash", "echo\n")
        assert isinstance(exc_info.value, PermissionError)
        # content is already on disk; only the mode failed
        assert (tmp_path / "x.bash").read_text() == "echo\n"
