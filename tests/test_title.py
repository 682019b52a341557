import pytest

from publish_core.packaging.templates import get_template
from publish_core.packaging.title import (
    build_core_phrases,
    compose_title,
    repair_title,
    select_title,
    title_candidates,
)


def test_core_phrases_from_keywords():
    phrases = build_core_phrases(["react", "hooks", "guide", "state", "effects", "memo", "extra"])
    assert phrases.primary == "React Hooks Guide"
    assert phrases.secondary == "State Effects Memo"


def test_core_phrases_fallback():
    phrases = build_core_phrases([])
    assert phrases.primary == "YouTube Upload"
    assert phrases.secondary == ""


def test_candidates_fill_every_frame():
    candidates = title_candidates(get_template("tech"), "My Cool Video")
    assert candidates == [
        "Next-Gen My Cool Video Breakdown",
        "Mastering My Cool Video in Minutes",
        "Pro Guide: My Cool Video Explained",
        "My Cool Video: Tips, Tools & Workflows",
    ]


def test_select_prefers_closest_to_target():
    assert select_title(["a" * 40, "b" * 63, "c" * 68]) == "b" * 63


def test_select_tie_goes_to_first_frame():
    assert select_title(["a" * 60, "b" * 70]) == "a" * 60


@pytest.mark.parametrize("length", [60, 65, 70])
def test_repair_keeps_in_band_titles(length):
    title = "x" * length
    assert repair_title(title) == title


def test_repair_pads_short_titles():
    assert repair_title("x" * 10) == "x" * 10 + " | 2024 Guide"
    padded = repair_title("x" * 59)
    assert len(padded) == 70
    assert padded.startswith("x" * 59 + " | 2024")


def test_repair_truncates_long_titles():
    assert repair_title("x" * 71) == "x" * 66 + "…"
    assert repair_title("a" * 65 + " " + "b" * 5) == "a" * 65 + "…"


def test_compose_short_title_gets_suffix():
    assert compose_title(get_template("tech"), "My Cool Video") == "My Cool Video: Tips, Tools & Workflows | 2024 Guide"


def test_compose_in_band_title_untouched():
    title = compose_title(get_template("tutorial"), "Kubernetes Networking Fundamentals")
    assert title == "Everything You Need to Know About Kubernetes Networking Fundamentals"
    assert 60 <= len(title) <= 70


def test_compose_long_title_is_truncated():
    core = "Supercalifragilistic Antidisestablishment Pneumonoultramicroscopic"
    title = compose_title(get_template("gaming"), core)
    assert len(title) <= 70
    assert title.endswith("…")
    assert title.startswith("Ultimate Supercalifragilistic")


@pytest.mark.parametrize("category", ["tech", "vlog", "shorts", "gaming", "tutorial", "foo"])
@pytest.mark.parametrize("core", ["A", "YouTube Upload", "Kubernetes Networking Fundamentals", "W" * 90])
def test_title_never_exceeds_ceiling(category, core):
    assert len(compose_title(get_template(category), core)) <= 70
