"""
Unit tests for the stock File predicates.
"""
import os
import stat

from dupwalk.core import File, filters


def make_file(path: str, size: int) -> File:
    stats = os.stat_result((stat.S_IFREG | 0o644, 0, 0, 1, 0, 0, size, 0, 0, 0))
    return File(path=path, stats=stats)


class TestSizePredicates:

    def test_min_and_max_are_inclusive(self):
        files = [make_file(f"/f{size}", size) for size in (1023, 1024, 2048, 2049)]
        kept = [f.size for f in files if filters.min_size(1024)(f) and filters.max_size(2048)(f)]
        assert kept == [1024, 2048]

    def test_size_greater_than_is_strict(self):
        predicate = filters.size_greater_than(100)
        assert not predicate(make_file("/a", 100))
        assert predicate(make_file("/b", 101))


class TestExtensionPredicate:

    def test_case_insensitive_and_dot_optional(self):
        predicate = filters.has_extension("jpg", ".PNG")
        assert predicate(make_file("/p/photo.JPG", 1))
        assert predicate(make_file("/p/image.png", 1))
        assert not predicate(make_file("/p/doc.pdf", 1))

    def test_compound_extension(self):
        predicate = filters.has_extension(".tar.gz")
        assert predicate(make_file("/b/backup.tar.gz", 1))
        assert not predicate(make_file("/b/backup.gz", 1))

    def test_hidden_file_without_extension_rejected(self):
        assert not filters.has_extension(".bashrc")(make_file("/home/.bashrc", 1))

    def test_dotfile_with_extension_accepted(self):
        file = make_file("/proj/.eslintrc.json", 1)
        assert file.extension == ".json"
        assert filters.has_extension("json")(file)
        assert not filters.has_extension(".yaml")(file)

    def test_no_extensions_keeps_everything(self):
        assert filters.has_extension()(make_file("/any/thing.bin", 1))
