"""
Tests for ScanCommand: config building, predicates and execution.
"""
import pytest

from dupwalk.commands import ScanCommand
from dupwalk.core import ConfigError, ScanParams, WalkResults, WalkStats, sha256_fingerprint


class TestScanCommand:

    def test_accessors_before_execute(self):
        command = ScanCommand()
        with pytest.raises(RuntimeError):
            command.get_results()
        with pytest.raises(RuntimeError):
            command.get_walker()

    def test_build_config(self):
        params = ScanParams(root_dir="/data", workers=3, fingerprint="sha256",
                            skip_dirs=["build"], no_default_skip=True)
        config = ScanCommand.build_config(params)
        assert config.workers == 3
        assert config.fingerprint is sha256_fingerprint
        assert config.effective_skip_dirs == {"build"}

    def test_no_predicates_without_filters(self):
        assert ScanCommand.build_predicates(ScanParams(root_dir="/data")) == []

    def test_execute_sha256(self, sample_tree):
        params = ScanParams(root_dir=str(sample_tree["root"]), fingerprint="sha256", workers=4)
        command = ScanCommand()
        results, stats = command.execute(params)

        assert isinstance(results, WalkResults)
        assert isinstance(stats, WalkStats)
        assert command.get_results() is results
        assert command.get_walker().last_stats is stats

        groups = results.duplicate_groups()
        assert len(groups) == 1
        assert {f.path for f in groups[0].files} == {
            str(sample_tree["a"]), str(sample_tree["b"]), str(sample_tree["sub_a"])}
        assert stats.files == 5

    def test_execute_with_size_filter(self, sample_tree):
        params = ScanParams(root_dir=str(sample_tree["root"]), min_size_bytes=3)
        results, _ = ScanCommand().execute(params)
        assert {f.path for f in results.flatten()} == {str(sample_tree["c"]), str(sample_tree["e"])}

    def test_execute_with_extension_filter(self, sample_tree):
        (sample_tree["root"] / "photo.JPG").write_bytes(b"jpeg")
        params = ScanParams(root_dir=str(sample_tree["root"]), extensions=["jpg"])
        results, _ = ScanCommand().execute(params)
        assert [f.name for f in results.flatten()] == ["photo.JPG"]

    def test_missing_root(self, temp_dir):
        params = ScanParams(root_dir=str(temp_dir / "nope"))
        with pytest.raises(ConfigError):
            ScanCommand().execute(params)
