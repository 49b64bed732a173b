"""File writer for rendered pages.

Pages are written whole, UTF-8 encoded, under the configured output directory.
Output identifiers come straight from the manifest and are not sanitized.
Each page is written to a temporary file beside its target and moved into
place, so concurrent writers of the same outputID never interleave.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from feed_pages.errors import WriteError

logger = logging.getLogger(__name__)


def write_page(output_dir: Union[str, Path], filename: str, content: str) -> Path:
    """Persist a page.

    Args:
        output_dir: Directory the page is written under (created if missing)
        filename: Page file name, usually a manifest outputID
        content: Full page text

    Returns:
        Path of the written file

    Raises:
        WriteError: If the directory or file cannot be written
    """
    path = Path(output_dir) / filename
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    except OSError as e:
        raise WriteError(path, e.strerror or str(e)) from e

    try:
        with open(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except OSError as e:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise WriteError(path, e.strerror or str(e)) from e

    logger.info(f"Wrote {path}")
    return path


def index_filename(name: str) -> str:
    """Index file name as entered by the user, with .html appended when missing."""
    return name if name.endswith(".html") else name + ".html"
