from __future__ import annotations

class TagPageError(Exception):
    """Base class for everything this package raises on purpose."""

class InvalidTagInput(TagPageError, ValueError):
    """The tag of interest is empty, only '#' marks, or not a single token."""

class InvalidFrontmatter(TagPageError, ValueError):
    pass

class ConfigError(TagPageError, ValueError):
    pass

class DocumentReadError(TagPageError):
    """
    One document could not be read. Raised by stores, collected by the
    loader, never propagated out of a scan.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
