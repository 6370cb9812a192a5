class ScrapeError(Exception):
    """Base class for failures that abort a scrape run."""


class FetchError(ScrapeError):
    """Network or transport failure, or a body that is not text."""


class ParseError(ScrapeError):
    """A selector constant failed to compile. Indicates a bug, not bad input."""


class WriteError(ScrapeError):
    """The JSON output file could not be written."""
