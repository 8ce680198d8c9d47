"""
Shared fixtures for link pipeline tests.
Creates isolated temporary directories with controlled media trees.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def store_dir(temp_dir) -> Path:
    """Empty output store on the same filesystem as the inputs."""
    store = temp_dir / "store"
    store.mkdir()
    return store


@pytest.fixture
def media_tree(temp_dir) -> Dict[str, Path]:
    """
    Creates a controlled input tree:
    - a.jpg and b.jpg with identical bytes (one stored, one duplicate)
    - Thumbnails/c.png inside a skipped directory (whole subtree counts once)
    """
    files = {}
    root = temp_dir / "photos"
    root.mkdir()
    files["root"] = root

    content = b"\xff\xd8\xff\xe0" + b"JPEG" * 512
    files["a"] = root / "a.jpg"
    files["b"] = root / "b.jpg"
    files["a"].write_bytes(content)
    files["b"].write_bytes(content)

    thumbs = root / "Thumbnails"
    thumbs.mkdir()
    files["c"] = thumbs / "c.png"
    files["c"].write_bytes(b"\x89PNG" + b"P" * 256)

    return files


@pytest.fixture
def mixed_tree(temp_dir) -> Dict[str, Path]:
    """
    Creates a larger tree with every kind of rejection:
    - 3 identical .jpg files across nested folders (1 stored, 2 duplicates)
    - 2 unique .png files
    - the same bytes as the .jpg set saved as .JPEG (different extension → stored separately)
    - a .txt file (extension rejected)
    - a face crop matching the default skip-file pattern
    - a 'derivatives' directory (subtree skipped)
    """
    files = {}
    root = temp_dir / "mixed"
    (root / "2019" / "summer").mkdir(parents=True)
    (root / "2020").mkdir()
    (root / "derivatives" / "deep").mkdir(parents=True)
    files["root"] = root

    same = b"same-bytes" * 300
    files["jpg1"] = root / "one.jpg"
    files["jpg2"] = root / "2019" / "two.jpg"
    files["jpg3"] = root / "2019" / "summer" / "three.JPG"
    for key in ("jpg1", "jpg2", "jpg3"):
        files[key].write_bytes(same)

    files["jpeg"] = root / "2020" / "four.JPEG"
    files["jpeg"].write_bytes(same)

    files["png1"] = root / "2020" / "p1.png"
    files["png1"].write_bytes(b"png-one" * 100)
    files["png2"] = root / "2020" / "p2.png"
    files["png2"].write_bytes(b"png-two" * 100)

    files["txt"] = root / "notes.txt"
    files["txt"].write_bytes(b"not media")

    files["face"] = root / "2019" / "img.jpg_face3.jpg"
    files["face"].write_bytes(b"a face crop")

    files["derived"] = root / "derivatives" / "deep" / "x.jpg"
    files["derived"].write_bytes(b"derived")

    return files


@pytest.fixture
def list_store():
    """Returns a helper listing every regular file in a store, relative to it, sorted."""
    def _list(store: Path):
        return sorted(str(p.relative_to(store)) for p in store.rglob("*") if p.is_file())
    return _list
