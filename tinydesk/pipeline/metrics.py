from dataclasses import dataclass, field


@dataclass
class ArchiveMetrics:
    """Track counts and timing for one archive run."""
    period: str
    listing_pages: int = 0
    concerts_found: int = 0
    files_written: int = 0
    written_paths: list = field(default_factory=list)
    duration_ms: float = 0.0
