"""Unit tests for the page writer."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from feed_pages.errors import WriteError
from feed_pages.storage import index_filename, write_page


def test_write_page(tmp_path):
    path = write_page(tmp_path, "x.html", "<p>héllo</p>")

    assert path == tmp_path / "x.html"
    assert path.read_text(encoding="utf-8") == "<p>héllo</p>"


def test_write_page_creates_directory(tmp_path):
    path = write_page(tmp_path / "site" / "feeds", "x.html", "x")

    assert path.exists()


def test_write_page_overwrites(tmp_path):
    write_page(tmp_path, "x.html", "first")
    path = write_page(tmp_path, "x.html", "second")

    assert path.read_text(encoding="utf-8") == "second"


def test_write_failure_raises_write_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(WriteError) as exc_info:
        write_page(blocker, "x.html", "x")

    assert isinstance(exc_info.value.__cause__, OSError)


@pytest.mark.parametrize("name, expected", [
    ("index", "index.html"),
    ("index.html", "index.html"),
    ("my.feeds", "my.feeds.html"),
])
def test_index_filename(name, expected):
    assert index_filename(name) == expected


def test_concurrent_writes_never_interleave(tmp_path):
    """Test that racing writers of one file leave exactly one of the two pages."""
    long_page = "x" * (4 * 1024 * 1024)
    short_page = "short page"

    for _ in range(20):
        barrier = threading.Barrier(2)

        def write(content):
            barrier.wait()
            write_page(tmp_path, "same.html", content)

        with ThreadPoolExecutor(max_workers=2) as pool:
            list(pool.map(write, [long_page, short_page]))

        assert (tmp_path / "same.html").read_text(encoding="utf-8") in (long_page, short_page)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["same.html"]
