"""Shared test fixtures."""

import pytest

from repo_card import PrimaryLanguage, RepositorySummary


@pytest.fixture
def demo_repo():
    """A minimal repository with no description."""
    return RepositorySummary(
        name="demo",
        name_with_owner="octocat/demo",
        description="",
        star_count=1200,
        fork_count=3,
        is_archived=False,
        is_template=False,
    )


@pytest.fixture
def sample_repo():
    """A repository with a description and a primary language."""
    return RepositorySummary(
        name="repo-card",
        name_with_owner="example/repo-card",
        description="SVG summary cards for GitHub repositories",
        primary_language=PrimaryLanguage(name="Python", color="#3572A5"),
        star_count=15300,
        fork_count=420,
    )


@pytest.fixture
def long_description():
    """Prose long enough to need more than three description lines."""
    return (
        "A small toolkit that renders repository summary cards as standalone SVG "
        "documents, wrapping the description into a fixed number of lines, laying "
        "out the star and fork counters, and resolving theme colours so the card "
        "looks right in light and dark READMEs alike without any browser involved."
    )
