from typing import Any, Dict, Optional

from google.auth.exceptions import GoogleAuthError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload
from loguru import logger

from publish_core.config_manager import ConfigManager
from publish_core.distribution.base import BaseUploader
from publish_core.distribution.models import PublishDirective, PublishRequest, PublishResult
from publish_core.distribution.schedule import format_readable
from publish_core.errors import MissingCredentials, PublishFailure
from publish_core.ingestion.models import MediaSource

SCOPES = ["https://www.googleapis.com/auth/youtube.upload"]


def build_status(directive: PublishDirective) -> Dict[str, Any]:
    status: Dict[str, Any] = {
        "privacyStatus": directive.visibility.value,
        "selfDeclaredMadeForKids": directive.age_restricted,
    }
    if directive.publish_at is not None:
        status["publishAt"] = format_readable(directive.publish_at)
    return status


def build_video_body(request: PublishRequest) -> Dict[str, Any]:
    return {
        "snippet": {
            "title": request.title,
            "description": request.description,
            "tags": list(request.tags),
            "categoryId": request.classification_code,
            "defaultLanguage": request.language,
            "defaultAudioLanguage": request.language,
        },
        "status": build_status(request.directive),
    }


class YouTubeUploader(BaseUploader):
    """Single-shot YouTube Data API v3 upload using a stored OAuth refresh token."""

    def __init__(self, config_manager: ConfigManager):
        super().__init__(config_manager)
        self.service: Optional[Any] = None

    def authenticate(self) -> None:
        if not (self.cfg.client_id and self.cfg.client_secret and self.cfg.refresh_token):
            raise MissingCredentials("Missing Google API credentials in environment variables.")

        creds = Credentials(
            token=None,
            refresh_token=self.cfg.refresh_token,
            token_uri=self.cfg.token_uri,
            client_id=self.cfg.client_id,
            client_secret=self.cfg.client_secret,
            scopes=SCOPES,
        )
        self.service = build("youtube", "v3", credentials=creds, cache_discovery=False)

    def upload(self, request: PublishRequest, media: MediaSource) -> PublishResult:
        if not self.service:
            self.authenticate()

        body = build_video_body(request)
        logger.info(f"Uploading to YouTube: {request.title} ({body['status']['privacyStatus']})")

        try:
            media_body = MediaIoBaseUpload(
                media.stream,
                mimetype=media.mimetype,
                chunksize=self.cfg.upload_chunk_size,
                resumable=True,
            )
            insert = self.service.videos().insert(part=",".join(body.keys()), body=body, media_body=media_body)

            response = None
            while response is None:
                status, response = insert.next_chunk()
                if status:
                    logger.info(f"Uploaded {int(status.progress() * 100)}%")
        except (HttpError, GoogleAuthError) as e:
            logger.error(f"YouTube upload failed: {e}")
            raise PublishFailure(f"YouTube upload failed: {e}") from e

        video_id = response.get("id")
        if not video_id:
            raise PublishFailure("YouTube upload failed: missing video ID.")

        logger.success(f"YouTube Upload Complete! Video ID: {video_id}")
        return PublishResult(
            external_id=video_id,
            external_url=f"{self.cfg.watch_url_base}{video_id}",
            scheduled_publish_at=body["status"].get("publishAt"),
        )
