"""Render a film blueprint as a downloadable document."""
from __future__ import annotations

from scriptoria.schemas.blueprint import SECTION_TITLES, FilmBlueprint

DEFAULT_TITLE = "Film Blueprint"


def _filled_sections(blueprint: FilmBlueprint) -> list[tuple[str, str]]:
    sections = []
    for field, title in SECTION_TITLES:
        content = getattr(blueprint, field).strip()
        if content:
            sections.append((title, content))
    return sections


def blueprint_to_markdown(blueprint: FilmBlueprint, title: str | None = None) -> str:
    lines = [f"# {title or DEFAULT_TITLE}", ""]
    for section_title, content in _filled_sections(blueprint):
        lines.extend([f"## {section_title}", "", content, ""])
    return "\n".join(lines).rstrip() + "\n"


def blueprint_to_text(blueprint: FilmBlueprint, title: str | None = None) -> str:
    heading = (title or DEFAULT_TITLE).upper()
    lines = [heading, "=" * len(heading), ""]
    for section_title, content in _filled_sections(blueprint):
        upper = section_title.upper()
        lines.extend([upper, "-" * len(upper), content, ""])
    return "\n".join(lines).rstrip() + "\n"


EXPORT_FORMATS = {
    "markdown": (blueprint_to_markdown, "text/markdown; charset=utf-8", "md"),
    "text": (blueprint_to_text, "text/plain; charset=utf-8", "txt"),
}
