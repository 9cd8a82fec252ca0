"""Remote image download client."""

import requests


class MediaDownloadError(RuntimeError):
    """Image could not be downloaded."""

    pass


class MediaClient:
    """Downloads packshots and other images referenced by URL."""

    HEADERS = {
        "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    }

    def __init__(self, timeout: int = 30):
        self.timeout = timeout

    def fetch(self, url: str) -> bytes:
        """Download a URL into memory."""
        try:
            response = requests.get(url, headers=self.HEADERS, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise MediaDownloadError(f"Failed to download {url}: {e}") from e
        return response.content
