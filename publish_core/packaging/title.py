from typing import List, Sequence

from publish_core.packaging.models import CORE_PLACEHOLDER, CategoryTemplate, CorePhrases
from publish_core.utils.text_utils import to_title_case

TITLE_MIN_LENGTH = 60
TITLE_MAX_LENGTH = 70
TITLE_TARGET_LENGTH = 65
TITLE_TRUNCATE_AT = 66
SHORT_TITLE_SUFFIX = " | 2024 Guide"
ELLIPSIS = "…"
FALLBACK_CORE = "YouTube Upload"


def build_core_phrases(keywords: Sequence[str]) -> CorePhrases:
    """Primary phrase from keywords 1-3, secondary from keywords 4-6."""
    if not keywords:
        return CorePhrases(primary=FALLBACK_CORE)
    return CorePhrases(
        primary=to_title_case(" ".join(keywords[:3])),
        secondary=to_title_case(" ".join(keywords[3:6])),
    )


def fill_placeholder(fragment: str, core: str) -> str:
    return fragment.replace(CORE_PLACEHOLDER, core, 1)


def title_candidates(template: CategoryTemplate, core: str) -> List[str]:
    return [fill_placeholder(frame, core) for frame in template.title_frames]


def select_title(candidates: Sequence[str]) -> str:
    """Picks the candidate closest to the target length; earlier frames win ties."""
    return min(candidates, key=lambda candidate: abs(len(candidate) - TITLE_TARGET_LENGTH))


def repair_title(title: str) -> str:
    """Forces ``title`` under the length ceiling, padding short ones with a suffix."""
    if TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
        return title
    if len(title) < TITLE_MIN_LENGTH:
        return f"{title}{SHORT_TITLE_SUFFIX}"[:TITLE_MAX_LENGTH]
    return f"{title[:TITLE_TRUNCATE_AT].strip()}{ELLIPSIS}"


def compose_title(template: CategoryTemplate, core: str) -> str:
    return repair_title(select_title(title_candidates(template, core)))
