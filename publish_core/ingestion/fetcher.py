import mimetypes
import tempfile
from pathlib import Path
from typing import BinaryIO, Optional

import requests
from loguru import logger

from publish_core.config_manager import ConfigManager, IngestionConfig
from publish_core.errors import MediaSourceError
from publish_core.ingestion.models import MediaSource


def _guess_mimetype(label: str) -> str:
    mimetype, _ = mimetypes.guess_type(label)
    return mimetype or "application/octet-stream"


class MediaFetcher:
    """
    Turns a local path, an uploaded file or a direct video URL into a
    MediaSource. Only the label is used for metadata; bytes pass through.
    """

    def __init__(self, config_manager: ConfigManager):
        self.cfg: IngestionConfig = config_manager.ingestion

    def resolve(
        self,
        file_path: Optional[str] = None,
        url: Optional[str] = None,
    ) -> MediaSource:
        """Exactly one of ``file_path`` / ``url`` must be given."""
        if file_path and url:
            raise MediaSourceError("Provide only one video source: upload OR URL.")
        if file_path:
            return self.from_path(file_path)
        if url:
            return self.from_url(url)
        raise MediaSourceError("A video file or direct video URL is required.")

    def from_path(self, file_path: str) -> MediaSource:
        path = Path(file_path)
        if not path.is_file():
            raise MediaSourceError(f"Video file not found: {file_path}")

        logger.info(f"Using local video: {path}")
        return MediaSource(
            label=path.name,
            stream=open(path, "rb"),
            mimetype=_guess_mimetype(path.name),
        )

    def from_upload(self, filename: str, stream: BinaryIO) -> MediaSource:
        return MediaSource(label=filename, stream=stream, mimetype=_guess_mimetype(filename))

    def from_url(self, url: str) -> MediaSource:
        """Streams the URL into a spooled temp file so the uploader can seek it."""
        logger.info(f"Fetching video from: {url}")
        try:
            response = requests.get(url, stream=True, timeout=self.cfg.request_timeout)
        except requests.RequestException as e:
            logger.error(f"Video fetch failed: {e}")
            raise MediaSourceError("Failed to fetch the video from the provided URL.") from e

        with response:
            if not response.ok:
                logger.error(f"Video fetch returned HTTP {response.status_code} for {url}")
                raise MediaSourceError("Failed to fetch the video from the provided URL.")

            buffer = tempfile.SpooledTemporaryFile(max_size=self.cfg.spool_max_size)
            written = 0
            try:
                for chunk in response.iter_content(chunk_size=self.cfg.download_chunk_size):
                    if chunk:
                        buffer.write(chunk)
                        written += len(chunk)
            except requests.RequestException as e:
                buffer.close()
                raise MediaSourceError("Failed to fetch the video from the provided URL.") from e

        buffer.seek(0)
        logger.debug(f"Fetched {written} bytes from {url}")
        mimetype = response.headers.get("content-type") or _guess_mimetype(url)
        return MediaSource(label=url, stream=buffer, mimetype=mimetype.split(";")[0])
