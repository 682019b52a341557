from datetime import datetime
from typing import Optional

from publish_core.distribution.models import PublishDirective, Visibility


def resolve_visibility(monetization: str, schedule: Optional[datetime]) -> Visibility:
    # A schedule always wins: YouTube only honours publishAt on private videos.
    if schedule is not None:
        return Visibility.PRIVATE
    if monetization == "limited":
        return Visibility.UNLISTED
    return Visibility.PUBLIC


def resolve_publish_directive(monetization: str, schedule: Optional[datetime] = None) -> PublishDirective:
    visibility = resolve_visibility(monetization, schedule)
    return PublishDirective(
        visibility=visibility,
        age_restricted=monetization == "disabled",
        publish_at=schedule if visibility is Visibility.PRIVATE else None,
    )
