from publish_core.packaging.models import CategoryTemplate

THUMBNAIL_STYLE = "HDR, ultra sharp, punchy contrast"


def compose_thumbnail_prompt(title: str, template: CategoryTemplate) -> str:
    """Builds an image-generation prompt from the lead scene and the title text before any colon."""
    headline = title.split(":", 1)[0]
    return (
        f"Create a high-impact thumbnail featuring {template.thumbnail_scenes[0]} "
        f'with the text "{headline}" in bold typography. Style: {THUMBNAIL_STYLE}.'
    )
