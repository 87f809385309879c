#!/usr/bin/env python3
"""Main entry point for the repository card generator."""

import argparse
import sys
from pathlib import Path

import yaml

from card_colors import list_themes
from card_i18n import is_locale_available
from repo_card import CardValidationError, RenderOptions, RepositorySummary, render_repo_card


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate an SVG card for a GitHub repository.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with `repository` and `options` sections (default: config.yaml in the project root)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Where to write the SVG (default: output/repo-card.svg in the project root)",
    )
    parser.add_argument("--theme", help="Theme name, overrides the config file")
    parser.add_argument("--locale", help="Locale for badge labels, overrides the config file")
    parser.add_argument(
        "--show-owner",
        action="store_true",
        help="Show owner/name in the title instead of the bare name",
    )
    parser.add_argument(
        "--list-themes",
        action="store_true",
        help="Print the available theme names and exit",
    )
    return parser.parse_args(argv)


def load_config(config_path: str | Path = "config.yaml") -> dict:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def main(argv: list[str] | None = None) -> int:
    """Generate the repository card."""
    args = parse_args(argv)

    if args.list_themes:
        for name in list_themes():
            print(name)
        return 0

    # Determine paths
    project_root = Path(__file__).resolve().parent.parent
    config_path = args.config or project_root / "config.yaml"
    output_path = args.output or project_root / "output" / "repo-card.svg"

    print("=" * 50)
    print("Repository Card Generator")
    print("=" * 50)

    print("\n[1/3] Loading configuration...")
    try:
        config = load_config(config_path)
    except (FileNotFoundError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        return 1

    repo_data = config.get("repository")
    if not isinstance(repo_data, dict):
        print(f"Error: repository not specified in {config_path}")
        return 1

    option_data = dict(config.get("options") or {})
    if args.theme:
        option_data["theme"] = args.theme
    if args.locale:
        option_data["locale"] = args.locale
    if args.show_owner:
        option_data["show_owner"] = True

    try:
        repo = RepositorySummary.from_mapping(repo_data)
        options = RenderOptions.from_mapping(option_data)
    except CardValidationError as e:
        print(f"Error: {e}")
        return 1

    if options.theme not in list_themes():
        print(f"  Warning: unknown theme '{options.theme}', using the default theme")
    if options.locale and not is_locale_available(options.locale):
        print(f"  Warning: unknown locale '{options.locale}', using English")

    print(f"  Repository: {repo.name_with_owner}")
    print(f"  Stars: {repo.star_count:,}  Forks: {repo.fork_count:,}")
    print(f"  Theme: {options.theme}")

    print("\n[2/3] Rendering card...")
    svg = render_repo_card(repo, options)

    print("\n[3/3] Writing output...")
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(svg, encoding="utf-8")

    print("\n" + "=" * 50)
    print("✓ Repository card generated successfully!")
    print(f"  Output: {output_path}")
    print("=" * 50)

    return 0


if __name__ == "__main__":
    sys.exit(main())
