from enum import Enum
from types import MappingProxyType

import markdown  # pip install markdown

from .errors import UnknownFormatError


class Format(Enum):
    """Source markup of a post, converted to HTML on render."""

    MARKDOWN = "markdown"
    HTML = "html"

    def convert(self, content: bytes, extensions=()) -> bytes:
        if self is Format.MARKDOWN:
            text = content.decode("utf-8", errors="surrogateescape")
            html = markdown.markdown(text, extensions=list(extensions))
            return html.encode("utf-8", errors="surrogateescape")
        # HTML is already rendered
        return content


# Keyed on the raw extension, without the dot. Case-sensitive.
FORMATS = MappingProxyType({
    "txt": Format.MARKDOWN,
    "md": Format.MARKDOWN,
    "html": Format.HTML,
})


def format_for_extension(ext: str) -> Format:
    try:
        return FORMATS[ext]
    except KeyError:
        raise UnknownFormatError(ext) from None
