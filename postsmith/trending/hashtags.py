"""Hashtag synthesis for sources without native tags."""

import re

TRENDING_WORDS = {
    "ai", "tech", "crypto", "climate", "startup", "innovation", "business", "marketing",
}

MAX_SYNTHESIZED = 10

_NON_LETTERS = re.compile(r"[^a-z]")
_TAGS = re.compile(r"<[^>]*>")
_NON_WORD = re.compile(r"[^a-zA-Z\s]")


def _dedupe(items) -> list[str]:
    return list(dict.fromkeys(items))


def hashtags_from_text(text: str) -> list[str]:
    """Tag curated keywords and long words found in free text.

    >>> hashtags_from_text("AI startups are reshaping healthcare")
    ['#Ai', '#Startups', '#Reshaping', '#Healthcare']
    """
    tags = []
    for word in text.lower().split():
        clean = _NON_LETTERS.sub("", word)
        if clean in TRENDING_WORDS or len(clean) > 6:
            tags.append(f"#{clean[0].upper()}{clean[1:]}")
    return _dedupe(tags)[:MAX_SYNTHESIZED]


def hashtags_from_trends(titles: list[str]) -> list[str]:
    """One tag per trend title: its first word longer than 3 letters."""
    tags = []
    for title in titles[:MAX_SYNTHESIZED]:
        clean = _NON_WORD.sub("", _TAGS.sub("", title)).strip()
        words = [w for w in clean.split() if len(w) > 3]
        if words:
            tags.append(f"#{words[0][0].upper()}{words[0][1:]}")
        else:
            tags.append("#Trending")
    return _dedupe(tags)
