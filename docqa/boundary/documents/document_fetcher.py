"""
Document download and text extraction.

Downloads a document over HTTP and extracts its text. PDFs are parsed with
LangChain's PyPDFLoader; plain text and e-mail files are decoded as UTF-8.
The type is decided from the Content-Type header, falling back to the URL
extension.

Dependencies: httpx, langchain_community.document_loaders
System role: Document source for the indexing pass
"""

import logging
import shutil
import tempfile
from pathlib import Path
from urllib.parse import urlparse

import httpx
from fastapi.concurrency import run_in_threadpool
from langchain_community.document_loaders import PyPDFLoader

from docqa.core.exceptions import DocumentFetchError, UnsupportedTypeError

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPES = ("application/pdf",)
TEXT_CONTENT_TYPES = ("text/plain", "message/rfc822")
TEXT_EXTENSIONS = ("txt", "eml")


def url_extension(url: str) -> str:
    """Lowercase file extension of the URL path, without the dot."""
    return Path(urlparse(url).path).suffix.lower().lstrip(".")


def parse_pdf(content: bytes) -> str:
    """
    Extract text from PDF bytes, one page per line block.

    Args:
        content: Raw PDF file content

    Returns:
        str: Concatenated page text

    Raises:
        UnsupportedTypeError: When the bytes are not a readable PDF
    """
    temp_dir = tempfile.mkdtemp(prefix="docqa_")
    try:
        file_path = Path(temp_dir) / "document.pdf"
        file_path.write_bytes(content)
        pages = PyPDFLoader(str(file_path)).load()
    except Exception as e:
        raise UnsupportedTypeError(
            f"Failed to parse PDF: {e}",
            content_type="application/pdf",
        ) from e
    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)

    return "\n".join(page.page_content for page in pages)


class HttpDocumentFetcher:
    """Fetch documents by URL and return their text."""

    def __init__(
        self,
        timeout_s: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize fetcher.

        Args:
            timeout_s: Download timeout
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.timeout_s = timeout_s
        self._transport = transport

    async def fetch_text(self, url: str) -> str:
        """
        Download a document and extract its text.

        Args:
            url: Absolute document URL

        Returns:
            str: Extracted text (may be empty)

        Raises:
            DocumentFetchError: Download failed (retryable unless the origin answered 4xx)
            UnsupportedTypeError: Content is neither PDF nor plain text
        """
        logger.info(f"{__name__}:fetch_text - Downloading {url}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_s,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise DocumentFetchError(
                f"Document download failed with HTTP {status}",
                url=url,
                status_code=status,
                retryable=status >= 500,
            ) from e
        except httpx.HTTPError as e:
            raise DocumentFetchError(f"Document download failed: {e}", url=url) from e

        content_type = response.headers.get("content-type", "").split(";")[0].strip().lower()
        extension = url_extension(url)

        if content_type in PDF_CONTENT_TYPES or extension == "pdf":
            text = await run_in_threadpool(parse_pdf, response.content)
        elif content_type in TEXT_CONTENT_TYPES or extension in TEXT_EXTENSIONS:
            text = response.content.decode("utf-8", errors="replace")
        else:
            raise UnsupportedTypeError(
                f"Unsupported document type or unable to determine type: "
                f"{content_type or extension or 'unknown'}",
                content_type=content_type or None,
            )

        logger.info(f"{__name__}:fetch_text - Extracted {len(text)} characters from {url}")
        return text
