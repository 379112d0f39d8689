from __future__ import annotations

from scriptoria.schemas.blueprint import FilmBlueprint
from scriptoria.services.export import blueprint_to_markdown, blueprint_to_text


def test_markdown_follows_display_order():
    blueprint = FilmBlueprint(production="Ten days.", casting="Two leads.", story="A heist.")

    md = blueprint_to_markdown(blueprint)

    assert md.startswith("# Film Blueprint\n")
    assert md.index("Story & Structure") < md.index("Casting Breakdown") < md.index("Production Plan")
    assert md.endswith("Ten days.\n")


def test_empty_sections_are_skipped():
    md = blueprint_to_markdown(FilmBlueprint(sound="  "))
    assert "Sound Design" not in md
    assert md == "# Film Blueprint\n"


def test_text_uses_underlined_titles():
    text = blueprint_to_text(FilmBlueprint(props="A compass."), title="Harbour")

    assert text.startswith("HARBOUR\n=======\n")
    assert "PROPS & SET DESIGN\n------------------\nA compass." in text
