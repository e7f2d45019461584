"""Entry point for prospect package."""

import argparse
import json
import logging
import sys
from typing import Optional

from prospect.config import get_config
from prospect.core.enums import Position
from prospect.core.models.scheme_fit import parse_scheme
from prospect.core.models.view import create_player_view_model
from prospect.core.sampling import make_rng
from prospect.generators.player import (
    PlayerGenerationOptions,
    generate_draft_class,
    generate_player,
    generate_roster,
)
from prospect.generators.skills import SkillTier

logger = logging.getLogger("prospect")


def _print_views(players, scheme, single: bool = False) -> None:
    views = [create_player_view_model(p, scheme).model_dump(mode="json") for p in players]
    print(json.dumps(views[0] if single else views, indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Prospect - player generation with scouting uncertainty",
        prog="prospect",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    parser.add_argument("--year", type=int, default=None, help="Current year for draft metadata")
    parser.add_argument(
        "--scheme",
        type=str,
        default=None,
        help="Scheme to describe fit against (e.g. west_coast, cover_two)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    player = subparsers.add_parser("player", help="Generate one player")
    player.add_argument("--position", choices=[p.value for p in Position], default=None)
    player.add_argument("--tier", choices=[t.value for t in SkillTier], default=None)
    player.add_argument("--draft", action="store_true", help="Generate a draft prospect")
    player.add_argument("--veteran", action="store_true", help="Generate an established veteran")

    roster = subparsers.add_parser("roster", help="Generate a team roster")
    roster.add_argument("team_id", nargs="?", default="team-1")

    draft = subparsers.add_parser("draft-class", help="Generate a draft class")
    draft.add_argument("--size", type=int, default=None)

    summary = subparsers.add_parser("summary", help="Print population calibration tables")
    summary.add_argument("--samples", type=int, default=2000, help="It factor samples")

    serve = subparsers.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", type=str, default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the Prospect CLI."""
    args = build_parser().parse_args(argv)
    config = get_config()
    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    for error in config.validate():
        logger.warning(f"Config: {error}")

    seed = args.seed if args.seed is not None else config.seed
    rng = make_rng(seed)
    current_year = args.year if args.year is not None else config.current_year

    try:
        scheme = parse_scheme(args.scheme) if args.scheme else None
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.command == "player":
        options = PlayerGenerationOptions(
            position=Position(args.position) if args.position else None,
            skill_tier=args.tier,
            for_draft=args.draft,
            veteran=args.veteran,
        )
        _print_views([generate_player(options, rng, current_year)], scheme, single=True)

    elif args.command == "roster":
        _print_views(generate_roster(args.team_id, rng, current_year), scheme)

    elif args.command == "draft-class":
        size = args.size if args.size is not None else config.draft_class_size
        _print_views(generate_draft_class(size, rng, current_year), scheme)

    elif args.command == "summary":
        from prospect.generators.calibration import (
            format_summary,
            it_factor_tier_proportions,
            physical_means_by_position,
            skill_tier_means,
        )

        print(
            format_summary(
                skill_tier_means(rng=rng),
                it_factor_tier_proportions(args.samples, rng=rng),
                physical_means_by_position("height", rng=rng),
            )
        )

    elif args.command == "serve":
        from prospect.api.main import run_api

        run_api(host=args.host, port=args.port, reload=args.reload)

    return 0


if __name__ == "__main__":
    sys.exit(main())
