import requests

from tinydesk import config
from tinydesk.errors import FetchError


def fetch_page(url, session=None, strict=None, log_func=None):
    """
    Fetch a page and return its body as text.

    Non-2xx responses are returned like any other page unless strict is set
    (defaults to config.STRICT_STATUS), in which case they raise FetchError.
    """
    log = log_func or print
    strict = config.STRICT_STATUS if strict is None else strict
    http = session or requests

    try:
        resp = http.get(url, timeout=config.REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise FetchError(f"Failed to send request to {url}: {e}") from e

    if not resp.ok:
        if strict:
            raise FetchError(f"Request to {url} returned HTTP {resp.status_code}")
        log(f"  WARNING: {url} returned HTTP {resp.status_code}, parsing body anyway")

    # Strict decode: a body that is not valid in its declared charset is a FetchError.
    encoding = resp.encoding or resp.apparent_encoding or "utf-8"
    try:
        return resp.content.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise FetchError(f"Failed to get response text from {url}: {e}") from e
