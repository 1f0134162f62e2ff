"""
Shared fixtures for walker tests.
Creates isolated temporary directory trees with controlled files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'dupwalk' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def sample_tree(temp_dir) -> Dict[str, Path]:
    """
    root/
        a.txt            "hi"
        b.txt            "hi"
        c.txt            "bye"
        empty.txt        ""           (never reported)
        sub/a.txt        "hi"         (same name + size as a.txt)
        sub/deeper/e.txt "hello world"
        .hidden/h.txt    "hi"         (hidden dir, always pruned)
        node_modules/n.txt "hi"       (default skip list)
    """
    files = {}

    def write(key: str, relative: str, content: bytes):
        path = temp_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        files[key] = path

    write("a", "a.txt", b"hi")
    write("b", "b.txt", b"hi")
    write("c", "c.txt", b"bye")
    write("empty", "empty.txt", b"")
    write("sub_a", "sub/a.txt", b"hi")
    write("e", "sub/deeper/e.txt", b"hello world")
    write("hidden", ".hidden/h.txt", b"hi")
    write("node", "node_modules/n.txt", b"hi")

    files["root"] = temp_dir
    return files


@pytest.fixture
def visible_paths(sample_tree):
    """Paths a default walk of sample_tree must report."""
    return {str(sample_tree[k]) for k in ("a", "b", "c", "sub_a", "e")}
