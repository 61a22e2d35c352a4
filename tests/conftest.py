import os
from datetime import datetime
from pathlib import Path

import pytest

DEFAULT_TEMPLATE = "<body>{{Content}}</body>"


def set_mtime(path: Path, when: datetime) -> None:
    ts = when.timestamp()
    os.utime(path, (ts, ts))


def write_file(path: Path, content, when: datetime = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    if when is not None:
        set_mtime(path, when)
    return path


@pytest.fixture
def source_tree(tmp_path):
    """
    Build a site source under tmp_path/src.

    Call with a mapping of relative path -> content (str or bytes). posts/
    and templates/default.html are created unless `with_posts` or
    `with_templates` is False.
    """

    def build(files=None, *, with_posts=True, with_templates=True, template=DEFAULT_TEMPLATE):
        root = tmp_path / "src"
        root.mkdir(exist_ok=True)
        if with_posts:
            (root / "posts").mkdir(exist_ok=True)
        if with_templates:
            write_file(root / "templates" / "default.html", template)
        for rel, content in (files or {}).items():
            write_file(root / rel, content)
        return root

    return build


@pytest.fixture
def dest_dir(tmp_path):
    return tmp_path / "dest"
