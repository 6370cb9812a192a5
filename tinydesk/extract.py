"""
Extraction of concert metadata from a Tiny Desk Concert page.

The page template is fixed: the artist comes from <title>, the subtitle from
the story title heading, the date from the dateblock, and everything else from
the paragraphs of #storytext. The set list and the musician roster are the
first list following a paragraph marked "SET LIST" / "MUSICIANS".
"""

import soupsieve as sv
from bs4 import BeautifulSoup, Tag

from tinydesk import config
from tinydesk.errors import ParseError
from tinydesk.models import ConcertRecord, Musician, Song
from tinydesk.utils.text import artist_from_title, parse_musician_line, strip_quotes

SET_LIST_MARKER = "SET LIST"
MUSICIANS_MARKER = "MUSICIANS"
LIST_CONTAINERS = ("ul", "ol")


def _compile(selector):
    try:
        return sv.compile(selector)
    except sv.SelectorSyntaxError as e:
        raise ParseError(f"Invalid selector {selector!r}: {e}") from e


TITLE = _compile("title")
STORY_TITLE = _compile(".storytitle h1")
DATE = _compile(".dateblock time[datetime]")
STORY_TEXT = _compile("#storytext")
PARAGRAPH = _compile("p")
LIST_ITEM = _compile(":scope > li")


def find_next_list(element):
    """Return the first ul/ol among the element's following siblings, or None."""
    for sibling in element.next_siblings:
        if isinstance(sibling, Tag) and sibling.name in LIST_CONTAINERS:
            return sibling
    return None


def list_item_texts(container):
    if container is None:
        return []
    return [li.get_text() for li in LIST_ITEM.select(container)]


def extract_set_list(paragraph):
    titles = [strip_quotes(text) for text in list_item_texts(find_next_list(paragraph))]
    return [Song(songNumber=i, title=title) for i, title in enumerate(titles, start=1)]


def extract_musicians(paragraph):
    musicians = []
    for text in list_item_texts(find_next_list(paragraph)):
        name, instruments = parse_musician_line(text)
        musicians.append(Musician(name=name, instruments=instruments))
    return musicians


def extract_concert(html, source_url):
    """Parse a concert page. Missing pieces come back as None or empty lists."""
    soup = BeautifulSoup(html, "html.parser")

    title_tag = TITLE.select_one(soup)
    artist = artist_from_title(title_tag.get_text() if title_tag else "")

    album_tag = STORY_TITLE.select_one(soup)
    album = album_tag.get_text().strip() if album_tag else None

    date_tag = DATE.select_one(soup)
    date = date_tag["datetime"] if date_tag else None

    description_parts = []
    description_done = False
    set_list = []
    musicians = []

    story = STORY_TEXT.select_one(soup)
    paragraphs = PARAGRAPH.select(story) if story else []

    for p in paragraphs:
        text = p.get_text().strip()
        has_set_list = SET_LIST_MARKER in text
        has_musicians = MUSICIANS_MARKER in text

        if has_set_list or has_musicians:
            description_done = True
        elif not description_done and text:
            description_parts.append(text)

        # Both markers may share a paragraph; each reads its own list.
        if has_set_list:
            set_list.extend(extract_set_list(p))
        if has_musicians:
            musicians.extend(extract_musicians(p))

    return ConcertRecord(
        artist=artist,
        source=source_url,
        show=config.SHOW_NAME,
        date=date,
        album=album,
        description="\n\n".join(description_parts) or None,
        setList=set_list,
        musicians=musicians,
    )
