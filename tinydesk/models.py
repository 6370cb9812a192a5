from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Song:
    songNumber: int
    title: str

    def to_dict(self):
        return {"songNumber": self.songNumber, "title": self.title}


@dataclass(frozen=True)
class Musician:
    name: str
    instruments: List[str] = field(default_factory=list)

    def to_dict(self):
        return {"name": self.name, "instruments": list(self.instruments)}


@dataclass(frozen=True)
class ConcertRecord:
    """Metadata extracted from a single concert page."""
    artist: str
    source: str
    show: str
    date: Optional[str] = None
    album: Optional[str] = None
    description: Optional[str] = None
    setList: List[Song] = field(default_factory=list)
    musicians: List[Musician] = field(default_factory=list)

    def to_dict(self):
        """Return the JSON shape, keys in output order. Missing values stay None."""
        return {
            "artist": self.artist,
            "source": self.source,
            "show": self.show,
            "date": self.date,
            "album": self.album,
            "description": self.description,
            "setList": [song.to_dict() for song in self.setList],
            "musicians": [musician.to_dict() for musician in self.musicians],
        }
