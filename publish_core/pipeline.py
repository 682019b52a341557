from typing import Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict

from publish_core.config_manager import ConfigManager
from publish_core.distribution.base import BaseUploader
from publish_core.distribution.directive import resolve_publish_directive
from publish_core.distribution.models import PublishDirective, PublishRequest, UploadSummary
from publish_core.distribution.schedule import format_readable, parse_schedule
from publish_core.distribution.youtube import YouTubeUploader
from publish_core.ingestion.models import MediaSource, UploadRequest
from publish_core.packaging.generator import generate_seo_package
from publish_core.packaging.models import SeoPackage
from publish_core.packaging.templates import get_classification_code


class PreparedUpload(BaseModel):
    """Metadata package and publish directive built from one request."""

    model_config = ConfigDict(frozen=True)

    seo: SeoPackage
    directive: PublishDirective
    classification_code: str
    language: str

    def to_publish_request(self) -> PublishRequest:
        return PublishRequest(
            title=self.seo.title,
            description=self.seo.description,
            tags=self.seo.tags + self.seo.hashtags,
            classification_code=self.classification_code,
            language=self.language,
            directive=self.directive,
        )

    def summary(self, external_id: Optional[str] = None, external_url: Optional[str] = None) -> UploadSummary:
        return UploadSummary(
            title=self.seo.title,
            description=self.seo.description,
            tags=self.seo.tags,
            hashtags=self.seo.hashtags,
            thumbnail_prompt=self.seo.thumbnail_prompt,
            scheduled_publish_at=format_readable(self.directive.publish_at),
            external_id=external_id,
            external_url=external_url,
        )


def prepare_upload(source_label: str, request: UploadRequest) -> PreparedUpload:
    """
    Builds metadata and directive for one request.

    The schedule is parsed first so an InvalidSchedule aborts before anything
    else is produced.
    """
    schedule = parse_schedule(request.schedule_time)
    seo = generate_seo_package(
        source_label=source_label,
        category=request.category,
        language=request.language,
        monetization=request.monetization,
    )
    return PreparedUpload(
        seo=seo,
        directive=resolve_publish_directive(request.monetization, schedule),
        classification_code=get_classification_code(request.category),
        language=request.language,
    )


class PipelineManager:
    def __init__(self, config_manager: ConfigManager, uploader: Optional[BaseUploader] = None):
        self.cfg = config_manager
        self.uploader = uploader

    def _get_uploader(self) -> BaseUploader:
        if self.uploader is None:
            self.uploader = YouTubeUploader(self.cfg)
        return self.uploader

    def preview(self, source_label: str, request: UploadRequest) -> PreparedUpload:
        prepared = prepare_upload(source_label, request)
        logger.info(f"Prepared '{prepared.seo.title}' as {prepared.directive.visibility.value}")
        return prepared

    def run(self, media: MediaSource, request: UploadRequest) -> UploadSummary:
        """Prepares metadata for ``media`` and publishes it once. Errors propagate unchanged."""
        logger.info(f"Starting publish for {media.label} (category={request.category})")

        prepared = self.preview(media.label, request)
        result = self._get_uploader().upload(prepared.to_publish_request(), media)

        logger.success(f"Published {result.external_url}")
        return prepared.summary(external_id=result.external_id, external_url=result.external_url)
