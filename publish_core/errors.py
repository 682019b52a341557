class PublishCoreError(Exception):
    """Base class for errors raised by publish_core."""


class InvalidSchedule(PublishCoreError, ValueError):
    """A non-empty schedule string did not resolve to a valid instant."""


class MediaSourceError(PublishCoreError):
    """The video source is missing, ambiguous or could not be fetched."""


class MissingCredentials(PublishCoreError):
    pass


class PublishFailure(PublishCoreError):
    pass
