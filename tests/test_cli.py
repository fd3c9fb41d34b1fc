"""Tests for the command line entry point."""

from compbench.__main__ import main, parse_args


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.input_dir == "corpora"
        assert args.output_dir == "output"
        assert args.tools is None
        assert args.files is None
        assert not args.no_shuffle
        assert not args.dry_run


class TestMain:
    def test_writes_scripts(self, tmp_path, capsys):
        assert main(["--script-dir", str(tmp_path), "--no-shuffle"]) == 0
        assert (tmp_path / "autogen-test.bash").exists()
        assert (tmp_path / "autogen-test-dec.bash").exists()
        out = capsys.readouterr().out
        assert "Scripts written to:" in out
        assert "build/packingtape zstd brotli src/fpaq0" in out

    def test_quiet(self, tmp_path, capsys):
        assert main(["--script-dir", str(tmp_path), "--quiet"]) == 0
        assert capsys.readouterr().out == ""

    def test_dry_run_writes_nothing(self, tmp_path, capsys):
        args = ["--script-dir", str(tmp_path), "--dry-run", "--files", "a.bin", "--tools", "zstd"]
        assert main(args) == 0
        assert list(tmp_path.iterdir()) == []
        out = capsys.readouterr().out
        assert out.startswith("#!/usr/bin/env bash\n")
        assert "zstd corpora/a.bin -o output/a.bin.zst" in out
        assert "rm output/a.bin" in out

    def test_custom_dirs(self, tmp_path):
        args = [
            "--script-dir", str(tmp_path),
            "--input-dir", "in",
            "--output-dir", "out",
            "--files", "x.txt",
            "--tools", "brotli",
        ]
        assert main(args) == 0
        text = (tmp_path / "autogen-test.bash").read_text()
        assert "brotli -v in/x.txt -o out/x.txt.br" in text

    def test_unknown_tool_fails(self, tmp_path):
        assert main(["--script-dir", str(tmp_path), "--tools", "gzip"]) == 1
        assert list(tmp_path.iterdir()) == []

    def test_bad_corpus_name_fails(self, tmp_path):
        assert main(["--script-dir", str(tmp_path), "--files", "../etc/passwd"]) == 1

    def test_unwritable_script_dir_fails(self, tmp_path):
        assert main(["--script-dir", str(tmp_path / "missing")]) == 1

    def test_list_tools(self, capsys):
        assert main(["--list-tools"]) == 0
        out = capsys.readouterr().out
        for tool_id in ("build/packingtape", "zstd", "brotli", "src/fpaq0"):
            assert tool_id in out

    def test_unsafe_output_dir_fails(self, tmp_path, caplog):
        args = ["--script-dir", str(tmp_path), "--output-dir", 'o"ut', "--files", "a.bin"]
        assert main(args) == 1
        assert list(tmp_path.iterdir()) == []
        assert any(r.name == "compbench.cli" and r.levelname == "ERROR" for r in caplog.records)

    def test_input_dir_with_space_fails(self, tmp_path):
        assert main(["--script-dir", str(tmp_path), "--input-dir", "my corpus"]) == 1
        assert list(tmp_path.iterdir()) == []
