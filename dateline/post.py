import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import jinja2  # pip install jinja2

from .errors import RenderError, SiteIOError
from .formats import Format, format_for_extension

logger = logging.getLogger(__name__)


def split_name(name: str):
    """
    Split a base name at its last dot: "foo.bar.md" -> ("foo.bar", "md").

    A name without a dot has an empty extension.
    """
    stem, dot, ext = name.rpartition(".")
    if not dot:
        return name, ""
    return stem, ext


@dataclass(frozen=True)
class Post:
    """A blog post read from the posts directory."""

    source: Path
    content: bytes
    format: Format
    pubdate: datetime
    dest_file_name: str

    @classmethod
    def from_source_file(cls, path) -> "Post":
        """
        Read a post from `path`.

        The format comes from the file extension and the publish date from
        the file's modification time; the contents are not inspected.
        """
        path = Path(path)
        try:
            st = path.stat()
        except OSError as exc:
            raise SiteIOError(path, "cannot stat post") from exc
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise SiteIOError(path, "cannot read post") from exc

        stem, ext = split_name(path.name)
        fmt = format_for_extension(ext)

        return cls(
            source=path,
            content=content,
            format=fmt,
            pubdate=datetime.fromtimestamp(st.st_mtime),
            dest_file_name=f"{stem}.html",
        )

    def date_parts(self):
        """Return ("YYYY", "MM") for the publish date."""
        return f"{self.pubdate.year:04d}", f"{self.pubdate.month:02d}"

    def dest_path(self, dest_root) -> Path:
        year, month = self.date_parts()
        return Path(dest_root) / year / month / self.dest_file_name

    def generate(self, fp, template: jinja2.Template, markdown_extensions=()):
        """Render the post through `template`, streaming the page into `fp`."""
        converted = self.format.convert(self.content, markdown_extensions)
        try:
            template.stream(Content=converted.decode("utf-8", errors="surrogateescape")).dump(fp)
        except jinja2.TemplateError as exc:
            raise RenderError(self.source, str(exc)) from exc
        except OSError:
            raise
        except Exception as exc:
            # errors raised by template expressions, e.g. {{ Content + 1 }}
            raise RenderError(self.source, f"{type(exc).__name__}: {exc}") from exc
