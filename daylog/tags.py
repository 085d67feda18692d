"""Hashtag extraction for journal entries."""

from __future__ import annotations

import re

TAG_RE = re.compile(r"#[^\s#]+")

# "#thought" in the app's label locale
THOUGHT_TAG = "#생각"


def extract_tags(content: str) -> list[str]:
    """Return every '#tag' token in *content*, in order of appearance."""
    return TAG_RE.findall(content or "")


def determine_category(tags: list[str]) -> str:
    if THOUGHT_TAG in tags:
        return "thought"
    return "action"
