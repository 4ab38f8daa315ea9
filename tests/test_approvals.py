from pathlib import Path

from recipe_codec import parse_text, serialize_text
from recipe_view import render_listing, render_markdown


APPROVAL_DIR = Path(__file__).parent / "approvals"


def _approval_path(name: str) -> Path:
    return APPROVAL_DIR / f"{name}.approved.txt"


def assert_approval(name: str, content: str) -> None:
    path = _approval_path(name)
    if not path.exists():
        raise AssertionError(
            f"Missing approval file for '{name}'. Create {path} with expected contents."
        )
    expected = path.read_text(encoding="utf-8")
    assert content == expected, f"Approval mismatch for '{name}'."


FIXTURE_TEXT = """
[Recept]
Våfflor
[Ingredienser]
3;dl;vetemjöl
;;salt
[Instruktioner]
Grädda i våffeljärn.

[Recept]
   Pannkakor
[Ingredienser]
3;dl;mjölk
  2;st;ägg

[Instruktioner]
Blanda allt.
Stek i smör.
"""


def test_fixture_file_round_trip_matches_approval():
    recipes = parse_text(FIXTURE_TEXT)

    assert_approval("recipe_file", serialize_text(recipes))


def test_fixture_markdown_and_listing_match_approvals():
    recipes = parse_text(FIXTURE_TEXT)

    assert_approval("markdown", render_markdown(recipes[0]))
    assert_approval("listing", "\n".join(render_listing(recipes)) + "\n")
