"""End-to-end tests for the repository card renderer."""

import re
import xml.etree.ElementTree as ET

import pytest

from card_layout import STAT_FONT_SIZE
from card_text import DESCRIPTION_PLACEHOLDER, measure_text
from repo_card import (
    LINE_HEIGHT,
    CardValidationError,
    RenderOptions,
    RepositorySummary,
    card_height,
    render_repo_card,
)


def _svg_height(svg: str) -> int:
    return int(re.search(r'<svg width="400" height="(\d+)"', svg).group(1))


def _by_testid(svg: str, testid: str) -> list[ET.Element]:
    root = ET.fromstring(svg)
    return [el for el in root.iter() if el.get("data-testid") == testid]


def test_demo_repository(demo_repo):
    svg = render_repo_card(demo_repo)

    assert ">1.2k</text>" in svg
    assert ">3</text>" in svg
    assert DESCRIPTION_PLACEHOLDER in svg
    assert 'data-testid="badge"' not in svg


def test_output_is_well_formed_svg(sample_repo):
    root = ET.fromstring(render_repo_card(sample_repo))
    assert root.tag.endswith("svg")
    assert root.get("width") == "400"
    assert root.get("viewBox") == f"0 0 400 {root.get('height')}"


def test_stats_and_description_markers(sample_repo):
    svg = render_repo_card(sample_repo)
    assert len(_by_testid(svg, "stats")) == 1
    assert len(_by_testid(svg, "stargazers")) == 1
    assert len(_by_testid(svg, "forkcount")) == 1
    assert len(_by_testid(svg, "description")) == 1


def test_template_badge_wins_over_archived():
    repo = RepositorySummary(name="both", name_with_owner="me/both", is_template=True, is_archived=True)
    svg = render_repo_card(repo)

    badges = _by_testid(svg, "badge")
    assert len(badges) == 1
    assert "Template" in svg
    assert "Archived" not in svg


def test_archived_badge_is_localized():
    repo = RepositorySummary(name="old", name_with_owner="me/old", is_archived=True)
    assert "Archived" in render_repo_card(repo)
    assert "Archiviert" in render_repo_card(repo, RenderOptions(locale="de"))
    assert "Archived" in render_repo_card(repo, RenderOptions(locale="xx"))


def test_show_owner_truncates_long_header():
    name_with_owner = "o" * 20 + "/" + "r" * 29
    assert len(name_with_owner) == 50
    repo = RepositorySummary(name="rrr", name_with_owner=name_with_owner)

    svg = render_repo_card(repo, RenderOptions(show_owner=True))

    expected = name_with_owner[:35] + "..."
    assert f'data-testid="header">{expected}</text>' in svg
    assert name_with_owner not in svg


def test_header_uses_bare_name_by_default(sample_repo):
    svg = render_repo_card(sample_repo)
    assert 'data-testid="header">repo-card</text>' in svg
    assert "example/repo-card" not in svg


def test_height_grows_by_line_height_per_description_line(sample_repo):
    one = _svg_height(render_repo_card(sample_repo, RenderOptions(description_lines_count=1)))
    three = _svg_height(render_repo_card(sample_repo, RenderOptions(description_lines_count=3)))
    assert three - one == 2 * LINE_HEIGHT
    assert card_height(3) - card_height(1) == 2 * LINE_HEIGHT


def test_line_count_is_clamped(sample_repo):
    low = render_repo_card(sample_repo, RenderOptions(description_lines_count=0))
    high = render_repo_card(sample_repo, RenderOptions(description_lines_count=7))
    assert _svg_height(low) == card_height(1)
    assert _svg_height(high) == card_height(3)
    assert _svg_height(render_repo_card(sample_repo)) == card_height(3)


def test_description_respects_clamped_lines(long_description):
    repo = RepositorySummary(name="long", name_with_owner="me/long", description=long_description)
    svg = render_repo_card(repo, RenderOptions(description_lines_count=1))

    tspans = [el for el in ET.fromstring(svg).iter() if el.tag.endswith("tspan")]
    assert len(tspans) == 1
    assert tspans[0].text.endswith("...")


def test_stats_row_is_anchored_to_bottom(sample_repo):
    for lines in (1, 2, 3):
        svg = render_repo_card(sample_repo, RenderOptions(description_lines_count=lines))
        height = _svg_height(svg)
        assert f'data-testid="stats" transform="translate(30, {height - 75})"' in svg


def test_stats_row_is_laid_out_left_to_right(demo_repo):
    stats = _by_testid(render_repo_card(demo_repo), "stats")[0]
    transforms = [child.get("transform") for child in stats]
    star_width = 16 + measure_text("1.2k", STAT_FONT_SIZE)

    assert transforms[0] == "translate(0, 0)"
    second_x = float(re.match(r"translate\(([\d.]+), 0\)", transforms[1]).group(1))
    assert second_x == pytest.approx(star_width + 25, abs=0.01)


def test_description_is_escaped():
    repo = RepositorySummary(name="x", name_with_owner="me/x", description="<script>alert(1)</script> & co")
    svg = render_repo_card(repo)
    assert "<script>" not in svg
    assert "&lt;script&gt;" in svg
    assert "&amp; co" in svg


def test_colors_and_border(sample_repo):
    svg = render_repo_card(sample_repo, RenderOptions(theme="radical", hide_border=True, border_radius=10))
    bg = _by_testid(svg, "card-bg")[0]
    assert bg.get("fill") == "#141321"
    assert bg.get("stroke-opacity") == "0"
    assert bg.get("rx") == "10"
    assert "fill: #fe428e" in svg


def test_disable_animations(sample_repo):
    svg = render_repo_card(sample_repo, RenderOptions(disable_animations=True))
    assert "animation-duration: 0s" in svg
    assert "@keyframes" not in svg


def test_render_is_deterministic(sample_repo):
    options = RenderOptions(theme="dark", show_owner=True)
    assert render_repo_card(sample_repo, options) == render_repo_card(sample_repo, options)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"star_count": -1},
        {"fork_count": -5},
        {"star_count": "many"},
        {"fork_count": 1.5},
        {"star_count": True},
    ],
)
def test_invalid_counts_are_rejected(kwargs):
    with pytest.raises(CardValidationError):
        RepositorySummary(name="x", name_with_owner="me/x", **kwargs)


@pytest.mark.parametrize("field", ["is_archived", "is_template"])
@pytest.mark.parametrize("value", ["false", 0, None])
def test_non_bool_repository_flags_are_rejected(field, value):
    with pytest.raises(CardValidationError):
        RepositorySummary(name="x", name_with_owner="me/x", **{field: value})


@pytest.mark.parametrize("field", ["hide_border", "show_owner", "disable_animations"])
@pytest.mark.parametrize("value", ["false", 1, None])
def test_non_bool_option_flags_are_rejected(field, value):
    with pytest.raises(CardValidationError):
        RenderOptions(**{field: value})


@pytest.mark.parametrize(
    "kwargs",
    [{"locale": 5}, {"theme": None}, {"theme": 3}, {"title_color": 0xFFFFFF}, {"border_color": ["e4e2e2"]}],
)
def test_non_string_options_are_rejected(kwargs):
    with pytest.raises(CardValidationError):
        RenderOptions(**kwargs)


def test_non_mapping_stargazers_is_rejected():
    with pytest.raises(CardValidationError):
        RepositorySummary.from_mapping({"name": "x", "stargazers": 5})


def test_missing_name_is_rejected():
    with pytest.raises(CardValidationError):
        RepositorySummary.from_mapping({"description": "no name"})


def test_render_rejects_wrong_input_types(sample_repo):
    with pytest.raises(CardValidationError):
        render_repo_card({"name": "x"})
    with pytest.raises(CardValidationError):
        render_repo_card(sample_repo, {"theme": "dark"})


def test_repository_from_graphql_mapping():
    repo = RepositorySummary.from_mapping(
        {
            "name": "demo",
            "nameWithOwner": "octocat/demo",
            "description": None,
            "primaryLanguage": {"name": "Python", "color": "#3572A5"},
            "isArchived": False,
            "isTemplate": True,
            "stargazers": {"totalCount": 42},
            "forkCount": "7",
        }
    )
    assert repo.star_count == 42
    assert repo.fork_count == 7
    assert repo.is_template
    assert repo.primary_language.name == "Python"


def test_repository_from_mapping_defaults_owner_name():
    repo = RepositorySummary.from_mapping({"name": "solo", "starCount": 0, "forkCount": 0})
    assert repo.name_with_owner == "solo"
    assert repo.primary_language is None


def test_render_options_from_mapping():
    options = RenderOptions.from_mapping(
        {
            "hide_border": "true",
            "show_owner": "false",
            "title_color": "fff",
            "description_lines_count": "2",
            "border_radius": "6",
            "unknown": "ignored",
        }
    )
    assert options.hide_border is True
    assert options.show_owner is False
    assert options.title_color == "fff"
    assert options.description_lines == 2
    assert options.border_radius == 6.0
    assert options.theme == "default_repocard"


def test_render_options_reject_non_numeric_line_count():
    with pytest.raises(CardValidationError):
        RenderOptions.from_mapping({"description_lines_count": "three"})
    with pytest.raises(CardValidationError):
        RenderOptions(description_lines_count="3")


def test_title_row_sits_above_body(sample_repo):
    svg = render_repo_card(sample_repo)
    title = _by_testid(svg, "card-title")
    body = _by_testid(svg, "main-card-body")
    assert len(title) == 1
    assert title[0].get("transform") == "translate(25, 35)"
    assert body[0].get("transform") == "translate(0, 55)"
