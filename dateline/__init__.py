"""Static site generator: copies assets and renders dated posts."""
from .copier import copy_tree, should_skip
from .errors import (
    AggregateCopyError,
    ConfigError,
    DatelineError,
    MissingDirectoryError,
    RenderError,
    SiteIOError,
    TemplateParseError,
    UnknownFormatError,
)
from .formats import FORMATS, Format, format_for_extension
from .post import Post
from .site import Site

__all__ = [
    "AggregateCopyError",
    "ConfigError",
    "DatelineError",
    "FORMATS",
    "Format",
    "MissingDirectoryError",
    "Post",
    "RenderError",
    "Site",
    "SiteIOError",
    "TemplateParseError",
    "UnknownFormatError",
    "copy_tree",
    "format_for_extension",
    "should_skip",
]
