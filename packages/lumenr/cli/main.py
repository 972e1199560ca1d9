"""Command-line interface for Lumenr.

Parses item descriptions from files, combines several into an effective
profile, or writes a new description from settings.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lumenr.core.authoring.generator import DescriptionSettings, render_description
from lumenr.core.config.loader import configure_logging, load_app_config
from lumenr.core.light.combiner import combine_profiles
from lumenr.core.light.models import LightProfile
from lumenr.core.parsers.descriptor import parse_light_profile
from lumenr.core.vocabulary.grammar import DescriptorGrammar, get_grammar

console = Console()
logger = logging.getLogger(__name__)


def _profile_table(profile: LightProfile, title: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("bright", str(profile.bright))
    table.add_row("dim", str(profile.dim))
    table.add_row("angle", str(profile.angle))
    table.add_row("color", profile.color or "-")
    table.add_row("alpha", f"{profile.alpha:g}")
    table.add_row("animation", profile.animation.type or "-")
    table.add_row("speed", str(profile.animation.speed))
    table.add_row("intensity", str(profile.animation.intensity))
    return table


def _print_profile(profile: LightProfile | None, title: str, as_json: bool) -> None:
    if as_json:
        data = profile.to_light_data() if profile is not None else None
        console.print_json(json.dumps(data, ensure_ascii=False))
    elif profile is None:
        console.print(f"[yellow]{title}: no light source[/yellow]")
    else:
        console.print(_profile_table(profile, title))


def _read_description(path: Path) -> str | None:
    if not path.exists():
        console.print(f"[red]ERROR: Description file not found: {path}[/red]")
        return None
    return path.read_text(encoding="utf-8")


def _resolve_grammar(args: argparse.Namespace) -> DescriptorGrammar:
    app_config = load_app_config(Path(args.app_config))
    configure_logging(app_config)
    return get_grammar(args.language or app_config.parsing.language)


def run_parse(args: argparse.Namespace) -> int:
    """Parse one description file and print its profile."""
    grammar = _resolve_grammar(args)
    path = Path(args.file)
    description = _read_description(path)
    if description is None:
        return 1

    profile = parse_light_profile(description, grammar, name=path.name)
    _print_profile(profile, path.name, args.json)
    return 0


def run_combine(args: argparse.Namespace) -> int:
    """Parse several description files and print the effective profile."""
    grammar = _resolve_grammar(args)

    profiles: list[LightProfile] = []
    for file in args.files:
        path = Path(file)
        description = _read_description(path)
        if description is None:
            return 1
        profile = parse_light_profile(description, grammar, name=path.name)
        if profile is None:
            logger.debug(f"{path.name} carries no light source")
            continue
        profiles.append(profile)

    title = f"Effective light ({len(profiles)} sources)"
    _print_profile(combine_profiles(profiles), title, args.json)
    return 0


def run_generate(args: argparse.Namespace) -> int:
    """Print description markup built from command-line settings."""
    grammar = _resolve_grammar(args)
    values = {
        key: getattr(args, key)
        for key in ("bright", "dim", "color", "animation", "speed", "intensity", "angle", "alpha")
        if getattr(args, key) is not None
    }
    settings = DescriptionSettings.model_validate(values)
    markup = render_description(settings, grammar)
    console.print(markup, markup=False, highlight=False, soft_wrap=True)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="lumenr",
        description="Lumenr - light profiles from item descriptions",
    )
    p.add_argument(
        "--app-config",
        default="config.json",
        help="Path to app config JSON/YAML (default: config.json)",
    )
    p.add_argument(
        "--language",
        choices=["ru", "en"],
        default=None,
        help="Description grammar (default: from app config)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    parse = sub.add_parser("parse", help="Parse one item description")
    parse.add_argument("file", help="Path to a file holding description markup")
    parse.add_argument("--json", action="store_true", help="Print the profile as JSON")

    combine = sub.add_parser("combine", help="Combine several item descriptions")
    combine.add_argument("files", nargs="+", help="Description files of the active items")
    combine.add_argument("--json", action="store_true", help="Print the profile as JSON")

    generate = sub.add_parser("generate", help="Write a light-source description")
    generate.add_argument("--bright", type=int, help="Bright radius (default: 60%% of dim)")
    generate.add_argument("--dim", type=int, help="Dim radius (default: 40)")
    generate.add_argument("--color", help="Color token (default: #ff8a00)")
    generate.add_argument("--animation", help="Animation id (default: flame)")
    generate.add_argument("--speed", type=int, help="Animation speed 0-10 (default: 7)")
    generate.add_argument("--intensity", type=int, help="Animation intensity 0-10 (default: 6)")
    generate.add_argument("--angle", type=int, help="Emission cone 1-360 (default: 360)")
    generate.add_argument("--alpha", type=float, help="Glow alpha 0-1 (default: 0)")

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    commands = {
        "parse": run_parse,
        "combine": run_combine,
        "generate": run_generate,
    }
    try:
        exit_code = commands[args.cmd](args)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
