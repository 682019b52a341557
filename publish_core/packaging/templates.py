from typing import Dict

from publish_core.packaging.models import Category, CategoryTemplate

CATEGORY_TEMPLATES: Dict[Category, CategoryTemplate] = {
    Category.TECH: CategoryTemplate(
        title_frames=(
            "Next-Gen {core} Breakdown",
            "Mastering {core} in Minutes",
            "Pro Guide: {core} Explained",
            "{core}: Tips, Tools & Workflows",
        ),
        description_focus=(
            "Stay ahead with the latest {core} strategies, best practices, and hands-on demos.",
            "We cover must-know updates, performance tweaks, and insider workflows to keep you sharp.",
            "Learn how to deploy, optimize, and scale with a practical walkthrough using real-world examples.",
        ),
        thumbnail_scenes=(
            "futuristic workstation, neon accents, holographic UI elements",
            "bold tech creator pointing at floating diagrams and schematics",
            "sleek gadget close-up with dramatic lighting and energy trails",
        ),
        classification_code="28",  # Science & Technology
    ),
    Category.VLOG: CategoryTemplate(
        title_frames=(
            "Day in the Life: {core}",
            "Behind the Scenes: {core}",
            "{core} Adventure Unfiltered",
            "Real Talk: {core} Moments",
        ),
        description_focus=(
            "Join me as I dive into {core} and share raw, unscripted moments from the journey.",
            "Expect candid highlights, honest reflections, and practical takeaways from today’s experience.",
            "Stay until the end for surprise lessons, personal wins, and what’s coming next.",
        ),
        thumbnail_scenes=(
            "cinematic cityscape background, creator smiling mid-action",
            "warm lifestyle aesthetic with candid snapshots and polaroids",
            "dynamic travel shot with motion blur and bold text overlays",
        ),
        classification_code="22",  # People & Blogs
    ),
    Category.SHORTS: CategoryTemplate(
        title_frames=(
            "60s {core} Challenge",
            "{core} in 30 Seconds",
            "Quick Fix: {core}",
            "Rapid Fire Tips: {core}",
        ),
        description_focus=(
            "A punchy, fast-paced breakdown of {core} packed into bite-sized insights.",
            "Perfect for creators on the move—save this short for quick reference anytime.",
            "Drop a comment with what you want covered next and share with someone who needs this.",
        ),
        thumbnail_scenes=(
            "bold text overlay with countdown timer vibe, vibrant gradients",
            "creator mid-motion with exaggerated expression and emojis",
            "split-screen comparison before vs after with punchy colors",
        ),
        classification_code="24",  # Entertainment
    ),
    Category.GAMING: CategoryTemplate(
        title_frames=(
            "Winning {core} Strategy Revealed",
            "Ultimate {core} Guide",
            "{core} Gameplay Breakdown",
            "Insane {core} Moments You Need to See",
        ),
        description_focus=(
            "Walk through the key plays, clutch moments, and tactical decisions behind this {core} run.",
            "Get the loadouts, builds, and pro-level moves that helped secure the win.",
            "Drop your favorite moment in the comments and share how you would play it differently.",
        ),
        thumbnail_scenes=(
            "intense action scene with character in spotlight, motion blur effects",
            "dramatic contrast lighting with bold stat overlays",
            "esports stage energy, neon streaks, triumphant pose",
        ),
        classification_code="20",  # Gaming
    ),
    Category.TUTORIAL: CategoryTemplate(
        title_frames=(
            "Step-by-Step {core} Tutorial",
            "Beginner to Pro: {core}",
            "{core} Complete Walkthrough",
            "Everything You Need to Know About {core}",
        ),
        description_focus=(
            "A structured, beginner-friendly tutorial covering every step of {core}.",
            "We walk through tools, common mistakes, and expert shortcuts to speed up your progress.",
            "Practice alongside the timestamps and download the resources linked below.",
        ),
        thumbnail_scenes=(
            "clean layout with numbered steps, bold highlight colors",
            "teacher-style pose in front of whiteboard with diagrams",
            "close-up on hands demonstrating steps with crisp lighting",
        ),
        classification_code="27",  # Education
    ),
}

DEFAULT_CATEGORY = Category.TECH
DEFAULT_TEMPLATE = CATEGORY_TEMPLATES[DEFAULT_CATEGORY]


def get_template(category: str) -> CategoryTemplate:
    """Returns the template bundle for ``category``; unknown categories get the tech bundle."""
    try:
        return CATEGORY_TEMPLATES[Category(category)]
    except ValueError:
        return DEFAULT_TEMPLATE


def get_classification_code(category: str) -> str:
    return get_template(category).classification_code
