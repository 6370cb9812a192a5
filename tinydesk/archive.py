"""
Scrape every Tiny Desk Concert published in a given month or day.

The NPR archive lists stories newest first, starting from an anchor date
(?date=MM-DD-YYYY) and paging with ?start=N. We anchor on the last day of the
requested period and page backwards until the listing runs past its first day.
"""

import time
from urllib.parse import urlencode, urljoin

import requests
from bs4 import BeautifulSoup

from tinydesk import config
from tinydesk.errors import FetchError
from tinydesk.fetch import fetch_page
from tinydesk.pipeline.concert import scrape_concert
from tinydesk.pipeline.metrics import ArchiveMetrics
from tinydesk.utils.dates import date_from_url, format_archive_date, parse_period, parse_published_date


def listing_url(anchor, start=0):
    params = {"date": format_archive_date(anchor)}
    if start:
        params["start"] = start
    return f"{config.ARCHIVE_URL}?{urlencode(params)}"


def parse_listing(html, base_url):
    """
    Pull (url, published_date) pairs from an archive listing page, in page order.
    published_date is None when neither the item nor its URL carries a date.
    Returns (items, article_count); article_count includes articles without a link.
    """
    soup = BeautifulSoup(html, "html.parser")
    articles = soup.select("article.item")
    items = []
    for article in articles:
        link = article.select_one("h2.title a[href]")
        if not link:
            continue
        url = urljoin(base_url, link["href"].strip())

        time_tag = article.select_one("time[datetime]")
        published = parse_published_date(time_tag["datetime"]) if time_tag else None
        if published is None:
            published = date_from_url(url)

        items.append((url, published))
    return items, len(articles)


def discover_concerts(start, end, session=None, delay=0, log_func=None):
    """
    Walk the archive listing for [start, end].
    Returns (concert URLs in listing order, number of listing pages fetched).
    Listing pages are fetched strictly; an error page here is never a concert list.
    """
    log = log_func or print
    found = []
    seen = set()
    seen_articles = set()
    offset = 0
    pages = 0

    while pages < config.ARCHIVE_MAX_PAGES:
        url = listing_url(end, offset)
        if pages and delay:
            time.sleep(delay)

        log(f"Fetching archive listing {url}")
        try:
            html = fetch_page(url, session=session, strict=True, log_func=log)
        except FetchError as e:
            raise FetchError(f"Failed to fetch archive listing {url}: {e}") from e
        pages += 1

        items, article_count = parse_listing(html, url)
        new_items = [(u, d) for u, d in items if u not in seen_articles]
        if not new_items:
            break

        past_start = False
        for item_url, published in new_items:
            seen_articles.add(item_url)
            if published is None:
                log(f"  Skipping {item_url}: no publish date")
                continue
            if published < start:
                past_start = True
                continue
            if published > end or item_url in seen:
                continue
            seen.add(item_url)
            found.append(item_url)

        if past_start:
            break
        offset += article_count

    return found, pages


def scrape_archive(year, month, day=None, session=None, output_dir=None, strict=None, delay=None, log_func=None):
    """
    Scrape all concerts published in year/month (or on year/month/day).
    Stops at the first error; files written before it stay on disk.
    Returns the list of paths written.
    """
    log = log_func or print
    delay = config.ARCHIVE_DELAY if delay is None else delay
    start, end = parse_period(year, month, day)
    period = start.isoformat() if start == end else start.strftime("%Y-%m")
    metrics = ArchiveMetrics(period=period)
    started = time.time()

    session = session or requests.Session()
    urls, metrics.listing_pages = discover_concerts(start, end, session=session, delay=delay, log_func=log)
    metrics.concerts_found = len(urls)
    log(f"Found {len(urls)} concerts for {period}")

    for i, url in enumerate(urls):
        if i and delay:
            time.sleep(delay)
        log("")
        path = scrape_concert(url, session=session, output_dir=output_dir, strict=strict, log_func=log)
        metrics.written_paths.append(path)
        metrics.files_written += 1

    metrics.duration_ms = (time.time() - started) * 1000
    log_summary(metrics, log_func=log)
    return metrics.written_paths


def log_summary(metrics, log_func=None):
    log = log_func or print
    log("")
    log("=" * 60)
    log(f"ARCHIVE SUMMARY {metrics.period}")
    log("=" * 60)
    log(f"{'Listing pages':<24} {metrics.listing_pages:>7}")
    log(f"{'Concerts found':<24} {metrics.concerts_found:>7}")
    log(f"{'Files written':<24} {metrics.files_written:>7}")
    log(f"{'Time':<24} {metrics.duration_ms:>5.0f}ms")
    log("=" * 60)
