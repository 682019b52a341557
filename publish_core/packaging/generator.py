import re
from typing import List, Sequence

from loguru import logger

from publish_core.packaging.models import CategoryTemplate, CorePhrases, SeoPackage
from publish_core.packaging.templates import get_template
from publish_core.packaging.thumbnail import compose_thumbnail_prompt
from publish_core.packaging.title import build_core_phrases, compose_title, fill_placeholder
from publish_core.utils.text_utils import KeywordPool, normalize_keywords, to_title_case

MAX_FOOTER_KEYWORDS = 15
MAX_TAGS = 15
MAX_HASHTAGS = 5

TIMESTAMPS = (
    "00:00 Intro",
    "00:45 Key Insights",
    "02:00 Deep Dive",
    "05:00 Final Thoughts",
)
CALLS_TO_ACTION = (
    "🔔 Subscribe for more: https://youtube.com",
    "👍 Like & comment what you want to see next!",
)

_HASHTAG_STRIP_RE = re.compile(r"[^a-z0-9]")


def build_keyword_pool(
    keywords: Sequence[str],
    core: str,
    category: str,
    language: str,
    monetization: str,
) -> KeywordPool:
    """
    Collects the footer keywords: normalized keywords (or a generic fallback),
    the core phrase words, language, two category phrases and the monetization
    value, deduplicated and capped.
    """
    pool = KeywordPool(MAX_FOOTER_KEYWORDS)
    pool.extend(keywords if keywords else ["youtube", "video", category])
    pool.extend(core.lower().split(" "))
    pool.add(language.lower())
    pool.add(f"{category} video")
    pool.add(f"best {category} tips")
    pool.add(monetization)
    return pool


def compose_description(
    title: str,
    phrases: CorePhrases,
    template: CategoryTemplate,
    pool: KeywordPool,
) -> str:
    focus = [fill_placeholder(line, phrases.primary) for line in template.description_focus]

    lines = [f"{title} — {phrases.primary}", ""]
    lines.extend(focus)
    lines.extend(["", "Timestamps:"])
    lines.extend(TIMESTAMPS)
    lines.extend(["", "Key Takeaways:"])
    lines.extend(f"- {line}" for line in focus[:2])
    lines.append("")
    lines.extend(CALLS_TO_ACTION)
    lines.extend(["", f"Keywords: {', '.join(pool)}"])
    return "\n".join(lines)


def build_tags(pool: KeywordPool) -> List[str]:
    return [to_title_case(keyword) for keyword in pool.head(MAX_TAGS)]


def build_hashtags(pool: KeywordPool) -> List[str]:
    return [f"#{_HASHTAG_STRIP_RE.sub('', keyword.lower())}" for keyword in pool.head(MAX_HASHTAGS)]


def generate_seo_package(source_label: str, category: str, language: str, monetization: str) -> SeoPackage:
    """Builds the full metadata package for one upload. Pure: same inputs, same package."""
    template = get_template(category)
    keywords = normalize_keywords(source_label)
    phrases = build_core_phrases(keywords)

    title = compose_title(template, phrases.primary)
    pool = build_keyword_pool(keywords, phrases.primary, category, language, monetization)

    logger.debug(
        f"SEO package for {source_label!r}: {len(keywords)} keywords, "
        f"core={phrases.primary!r}, secondary={phrases.secondary!r}"
    )

    return SeoPackage(
        title=title,
        description=compose_description(title, phrases, template, pool),
        tags=build_tags(pool),
        hashtags=build_hashtags(pool),
        thumbnail_prompt=compose_thumbnail_prompt(title, template),
    )
