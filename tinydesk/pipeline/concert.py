from tinydesk.extract import extract_concert
from tinydesk.fetch import fetch_page
from tinydesk.pipeline.io import write_record


def report_record(record, log_func=None):
    """Print a human-readable summary of an extracted record."""
    log = log_func or print

    log(f"Artist: {record.artist}")
    log(f"Story Title: {record.album}" if record.album else "No story title found")
    log(f"Date: {record.date}" if record.date else "No date found")

    if record.setList:
        log("\nSet list:")
        for song in record.setList:
            log(f"{song.songNumber}. {song.title}")
    else:
        log("No set list found")

    if record.musicians:
        log("\nMusicians:")
        for idx, musician in enumerate(record.musicians, start=1):
            log(f"{idx}. {musician.name}")
            if musician.instruments:
                log(f"   Instruments: {', '.join(musician.instruments)}")
    else:
        log("No musicians list found")


def scrape_concert(url, session=None, output_dir=None, strict=None, log_func=None):
    """Fetch, extract and save one concert page. Returns the path written."""
    log = log_func or print

    log(f"Navigating to {url}...")
    html = fetch_page(url, session=session, strict=strict, log_func=log)
    record = extract_concert(html, url)
    report_record(record, log_func=log)

    path = write_record(record, output_dir=output_dir)
    log(f"\nInformation saved to {path}")
    return path
