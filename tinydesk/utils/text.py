import re

from tinydesk import config

QUOTE_CHARS = "\"'“”‘’"


def strip_quotes(text):
    """Trim whitespace, then any run of quote characters at either end."""
    if not text:
        return ""
    return text.strip().strip(QUOTE_CHARS)


def artist_from_title(title):
    """Page titles look like "Artist: Tiny Desk Concert"; keep the part before the first colon."""
    if not title:
        return ""
    return title.split(":", 1)[0].strip()


def parse_musician_line(text):
    """
    Split a roster line into (name, instruments).
    "Jane Doe: guitar, vocals" -> ("Jane Doe", ["guitar", "vocals"])
    Lines without a colon are all name.
    """
    text = strip_quotes(text)
    name, sep, rest = text.partition(":")
    if not sep:
        return text, []

    instruments = [part.strip() for part in rest.split(",")]
    return name.strip(), [i for i in instruments if i]


def sanitize_filename(artist):
    """
    Build the output filename for an artist.
    Keeps letters, digits and whitespace, collapses whitespace to underscores, lowercases.
    """
    kept = "".join(ch for ch in (artist or "") if ch.isalnum() or ch.isspace())
    stem = re.sub(r"\s+", "_", kept.strip()).lower()
    return f"{stem or 'unknown'}{config.OUTPUT_SUFFIX}"
