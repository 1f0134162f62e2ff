"""
Tests for the command-line interface.
"""
import logging

import pytest

from dupwalk.cli import CLIApplication
from dupwalk.core.models import default_workers


@pytest.fixture
def app():
    logger = logging.getLogger("dupwalk")
    level = logger.level
    yield CLIApplication()
    logger.setLevel(level)


class TestParseArgs:

    def test_defaults(self):
        args = CLIApplication.parse_args(["-i", "/data"])
        assert args.input == "/data"
        assert args.workers == default_workers()
        assert args.fingerprint == "name"
        assert args.skip_dirs == []
        assert args.no_default_skip is False
        assert args.min_size is None
        assert args.max_size is None
        assert args.extensions == []
        assert args.list_all is False
        assert args.output is None

    def test_input_required(self):
        with pytest.raises(SystemExit):
            CLIApplication.parse_args([])

    def test_unknown_hash_rejected(self):
        with pytest.raises(SystemExit):
            CLIApplication.parse_args(["-i", "/data", "--hash", "crc32"])

    def test_options(self):
        args = CLIApplication.parse_args([
            "-i", "/data", "-w", "3", "--hash", "xxhash", "-s", "build", "dist",
            "--no-default-skip", "-m", "1KB", "-M", "1MB", "-x", ".jpg", "png", "--all"])
        assert args.workers == 3
        assert args.fingerprint == "xxhash"
        assert args.skip_dirs == ["build", "dist"]
        assert args.no_default_skip
        assert args.min_size == "1KB"
        assert args.max_size == "1MB"
        assert args.extensions == [".jpg", "png"]
        assert args.list_all


class TestValidateArgs:

    @pytest.mark.parametrize("extra", [
        ["-w", "0"],
        ["-m", "lots"],
        ["-M", "-1"],
        ["-m", "2MB", "-M", "1MB"],
    ])
    def test_invalid_options_exit(self, app, sample_tree, extra, capsys):
        args = app.parse_args(["-i", str(sample_tree["root"])] + extra)
        with pytest.raises(SystemExit) as exc:
            app.validate_args(args)
        assert exc.value.code == 1
        assert "Error" in capsys.readouterr().err

    def test_missing_directory(self, app, temp_dir):
        args = app.parse_args(["-i", str(temp_dir / "missing")])
        with pytest.raises(SystemExit) as exc:
            app.validate_args(args)
        assert exc.value.code == 1

    def test_root_is_a_file(self, app, sample_tree):
        args = app.parse_args(["-i", str(sample_tree["a"])])
        with pytest.raises(SystemExit):
            app.validate_args(args)

    def test_output_directory_must_exist(self, app, sample_tree, temp_dir):
        args = app.parse_args(["-i", str(sample_tree["root"]), "-o", str(temp_dir / "no" / "report.txt")])
        with pytest.raises(SystemExit):
            app.validate_args(args)


class TestRun:

    def test_duplicate_report(self, app, sample_tree, capsys):
        app.run(["-i", str(sample_tree["root"]), "--hash", "sha256"])
        out = capsys.readouterr().out

        assert "Found 1 duplicate groups" in out
        assert "---> 3 files" in out
        assert str(sample_tree["sub_a"]) in out
        assert str(sample_tree["c"]) not in out

    def test_name_fingerprint_report(self, app, sample_tree, capsys):
        app.run(["-i", str(sample_tree["root"])])
        out = capsys.readouterr().out
        assert "a.txt-2 ---> 2 files" in out

    def test_no_duplicates(self, app, temp_dir, capsys):
        (temp_dir / "one.txt").write_bytes(b"1")
        (temp_dir / "two.txt").write_bytes(b"22")
        app.run(["-i", str(temp_dir)])
        assert "No duplicate groups found." in capsys.readouterr().out

    def test_list_all(self, app, sample_tree, visible_paths, capsys):
        app.run(["-i", str(sample_tree["root"]), "--all"])
        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        assert set(lines) == visible_paths

    def test_output_file(self, app, sample_tree, temp_dir, capsys):
        report = temp_dir / "report.txt"
        app.run(["-i", str(sample_tree["root"]), "--hash", "md5", "-o", str(report)])

        assert f"Report written to {report}" in capsys.readouterr().out
        assert "---> 3 files" in report.read_text(encoding="utf-8")

    def test_size_filter(self, app, sample_tree, capsys):
        app.run(["-i", str(sample_tree["root"]), "--all", "-m", "3B"])
        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        assert set(lines) == {str(sample_tree["c"]), str(sample_tree["e"])}

    def test_no_default_skip_walks_node_modules(self, app, sample_tree, capsys):
        app.run(["-i", str(sample_tree["root"]), "--all", "--no-default-skip"])
        out = capsys.readouterr().out
        assert str(sample_tree["node"]) in out
        assert str(sample_tree["hidden"]) not in out

    def test_verbose_prints_statistics(self, app, sample_tree, capsys):
        app.run(["-i", str(sample_tree["root"]), "--verbose"])
        err = capsys.readouterr().err
        assert "Walk Statistics" in err
        assert "Completed in" in err
