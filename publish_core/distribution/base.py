from abc import ABC, abstractmethod

from publish_core.config_manager import ConfigManager
from publish_core.distribution.models import PublishRequest, PublishResult
from publish_core.ingestion.models import MediaSource


class BaseUploader(ABC):
    def __init__(self, config_manager: ConfigManager):
        self.cfg = config_manager.distribution

    @abstractmethod
    def authenticate(self) -> None:
        """Builds an authorized API client. Raises MissingCredentials when it cannot."""
        pass

    @abstractmethod
    def upload(self, request: PublishRequest, media: MediaSource) -> PublishResult:
        """Publishes once; raises PublishFailure on any platform error."""
        pass
