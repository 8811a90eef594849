"""DocumentFetcher: downloads the plain-text export of a shared Google Docs chord sheet."""

import logging
import re
from urllib.parse import urlparse

import requests
from requests.exceptions import RequestException

logger = logging.getLogger(__name__)

GOOGLE_DOCS_HOST = "docs.google.com"
_DOC_ID_PATTERN = re.compile(r"/document/d/([a-zA-Z0-9_-]+)")


class ChordSheetSourceError(RuntimeError):
    """Base class for failures while acquiring chord sheet text."""


class InvalidDocumentUrl(ChordSheetSourceError):
    """Raised when a URL is not a Google Docs document link."""


class DocumentFetchError(ChordSheetSourceError):
    """Raised when the export request fails or returns a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def extract_doc_id(url: str) -> str | None:
    """Return the document id from any share/edit/view URL, or None."""
    match = _DOC_ID_PATTERN.search(url)
    return match.group(1) if match else None


def export_url(doc_id: str) -> str:
    return f"https://{GOOGLE_DOCS_HOST}/document/d/{doc_id}/export?format=txt"


def is_document_url(source: str) -> bool:
    """True if ``source`` looks like an http(s) URL rather than a file path."""
    return urlparse(source).scheme in {"http", "https"}


class DocumentFetcher:
    """
    Fetches chord sheet text from Google Docs using one ``requests`` session.

    Usage as a context manager ensures the session is closed:

        with DocumentFetcher() as fetcher:
            text = fetcher.fetch_text(url)
    """

    def __init__(self, timeout: float = 10.0) -> None:
        self.timeout = timeout
        self.session = requests.Session()

    def resolve_export_url(self, url: str) -> str:
        """
        Validate a Google Docs link and return its plain-text export URL.

        Raises:
            InvalidDocumentUrl: If the URL is malformed, not on
                docs.google.com, or carries no document id.
        """
        parsed = urlparse(url)
        if parsed.scheme not in {"http", "https"} or not parsed.hostname:
            raise InvalidDocumentUrl(f"Invalid URL: {url!r}")
        if parsed.hostname != GOOGLE_DOCS_HOST:
            raise InvalidDocumentUrl("Only Google Docs URLs are supported")

        doc_id = extract_doc_id(parsed.path)
        if doc_id is None:
            raise InvalidDocumentUrl("Could not extract document ID from URL")
        return export_url(doc_id)

    def fetch_text(self, url: str) -> str:
        """
        Download the exported text of the document behind ``url``.

        Raises:
            InvalidDocumentUrl: See ``resolve_export_url``.
            DocumentFetchError: On transport errors or a non-2xx response.
        """
        target = self.resolve_export_url(url)
        logger.info("Fetching chord sheet export %s", target)
        try:
            resp = self.session.get(target, timeout=self.timeout)
        except RequestException as exc:
            raise DocumentFetchError("Failed to fetch chord sheet from Google Docs") from exc

        if not resp.ok:
            raise DocumentFetchError(
                f"Google Docs export returned {resp.status_code}",
                status_code=resp.status_code,
            )

        # Exports are UTF-8 with a BOM, often served without a charset
        text = resp.content.decode("utf-8", errors="replace").removeprefix("\ufeff")
        logger.debug("Fetched %d character(s)", len(text))
        return text

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "DocumentFetcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
