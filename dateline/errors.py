"""
Exceptions raised while building a site.

Everything derives from DatelineError so the command line can catch one type.
"""
from pathlib import Path


class DatelineError(Exception):
    """Base class for all dateline errors."""


class ConfigError(DatelineError):
    pass


class SiteIOError(DatelineError):
    """A filesystem operation on `path` failed."""

    def __init__(self, path, message: str = ""):
        self.path = Path(path)
        super().__init__(f"{message or 'I/O error'}: {self.path}")


class UnknownFormatError(DatelineError):
    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"unknown format {extension!r}")


class MissingDirectoryError(DatelineError):
    def __init__(self, path):
        self.path = Path(path)
        super().__init__(f"required directory does not exist: {self.path}")


class TemplateParseError(DatelineError):
    pass


class RenderError(DatelineError):
    """Template execution failed for the post at `path`."""

    def __init__(self, path, message: str):
        self.path = Path(path)
        super().__init__(f"error rendering {self.path}: {message}")


class AggregateCopyError(DatelineError):
    """
    One or more entries could not be copied during the tree copy.

    `failures` holds (source path, OSError) pairs in walk order.
    """

    def __init__(self, failures):
        self.failures = list(failures)
        super().__init__(f"error(s) copying source tree ({len(self.failures)} failed)")
