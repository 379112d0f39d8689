"""Agent helpers: section parsing of LLM output."""
from __future__ import annotations

import re

from scriptoria.schemas.blueprint import FilmBlueprint

# (field, keywords) checked in order; the first field with a keyword contained in
# the heading wins. "storyboard" must come before "story", "shots" before "production".
SECTION_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("storyboard", ("storyboard",)),
    ("story", ("story", "structure", "story & structure", "story and structure")),
    ("characters", ("character arc", "character arcs")),
    ("character_design", ("character design",)),
    ("locations", ("location",)),
    ("screenplay", ("screenplay",)),
    ("visual_style", ("visual style", "visual guide")),
    ("costumes", ("costume",)),
    ("props", ("prop", "set design")),
    ("sound", ("sound",)),
    ("shots", ("shot list", "shot")),
    ("lighting", ("lighting",)),
    ("casting", ("casting",)),
    ("production", ("production",)),
)

_NUMBERED = re.compile(r"^\d+\.")
_MARKUP = re.compile(r"[*#]")


def _is_heading_candidate(line: str) -> bool:
    return line.startswith("#") or line.startswith("**") or bool(_NUMBERED.match(line.strip()))


def match_section(line: str) -> str | None:
    """Return the blueprint field a heading line names, or None."""
    clean = _MARKUP.sub("", line.lower())
    for field, keywords in SECTION_KEYWORDS:
        if any(keyword in clean for keyword in keywords):
            return field
    return None


def parse_blueprint(content: str) -> FilmBlueprint:
    """Split heading-delimited LLM text into the 14 blueprint sections.

    Lines before the first recognised heading are dropped, a repeated heading
    replaces the earlier text for its section, and if nothing is recognised at
    all the whole text lands in ``story``.
    """
    blueprint, _ = parse_sections(content)
    return blueprint


def parse_sections(content: str) -> tuple[FilmBlueprint, bool]:
    """Like parse_blueprint, also reporting whether the whole-text fallback was used."""
    sections: dict[str, str] = {}
    current: str | None = None
    buffer: list[str] = []

    for line in content.split("\n"):
        found = None
        if _is_heading_candidate(line):
            found = match_section(line)

        if found is not None:
            if current and buffer:
                sections[current] = "\n".join(buffer).strip()
            current = found
            buffer = []
        elif current:
            buffer.append(line)

    if current and buffer:
        sections[current] = "\n".join(buffer).strip()

    blueprint = FilmBlueprint(**sections)
    if blueprint.is_empty():
        return FilmBlueprint(story=content), True
    return blueprint, False


def count_words(text: str) -> int:
    return len(text.split())
