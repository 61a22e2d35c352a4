import logging
from pathlib import Path

from jinja2 import (  # pip install jinja2
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
)

from .copier import copy_tree
from .errors import MissingDirectoryError, SiteIOError, TemplateParseError
from .post import Post

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "."
DEFAULT_DEST = "_site"

POSTS_DIRNAME = "posts"
TEMPLATES_DIRNAME = "templates"
TEMPLATE_NAME = "default.html"


def load_template(templates_dir: Path):
    """
    Load the site template, templates/default.html.

    Undefined names raise at render time, so `Content` is the only name a
    template can use.
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        undefined=StrictUndefined,
    )
    try:
        return env.get_template(TEMPLATE_NAME)
    except TemplateNotFound as exc:
        raise TemplateParseError(f"template not found: {templates_dir / TEMPLATE_NAME}") from exc
    except TemplateSyntaxError as exc:
        raise TemplateParseError(
            f"{templates_dir / TEMPLATE_NAME}:{exc.lineno}: {exc.message}"
        ) from exc
    except TemplateError as exc:
        raise TemplateParseError(f"{templates_dir / TEMPLATE_NAME}: {exc}") from exc


class Site:
    """A static site generated into `dest` from the source files in `source`."""

    def __init__(self, source="", dest="", markdown_extensions=()):
        self.source = Path(source or DEFAULT_SOURCE)
        self.dest = Path(dest or DEFAULT_DEST)
        self.markdown_extensions = tuple(markdown_extensions)

    def __repr__(self):
        return f"Site(source={str(self.source)!r}, dest={str(self.dest)!r})"

    @property
    def posts_dir(self) -> Path:
        return self.source / POSTS_DIRNAME

    @property
    def templates_dir(self) -> Path:
        return self.source / TEMPLATES_DIRNAME

    def generate(self):
        """
        Build the site: copy the source tree, then render every post.

        Stops at the first error. Whatever was written before it stays on
        disk. Returns the paths of the rendered posts.
        """
        copy_tree(self.source, self.dest)
        return self.generate_posts()

    def generate_posts(self):
        for required in (self.posts_dir, self.templates_dir):
            if not required.is_dir():
                raise MissingDirectoryError(required)

        template = load_template(self.templates_dir)

        try:
            entries = sorted(self.posts_dir.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise SiteIOError(self.posts_dir, "cannot list posts") from exc

        written = []
        for path in entries:
            if path.name.startswith("."):
                continue

            post = Post.from_source_file(path)
            out_path = post.dest_path(self.dest)
            try:
                out_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise SiteIOError(out_path.parent, "cannot create directory") from exc

            try:
                with out_path.open("w", encoding="utf-8", errors="surrogateescape") as fp:
                    post.generate(fp, template, self.markdown_extensions)
            except OSError as exc:
                raise SiteIOError(out_path, "cannot write post") from exc

            logger.info(f"Wrote {out_path}")
            written.append(out_path)

        return written
