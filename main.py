#!/usr/bin/env python3
"""
PSC console - Permission System Config viewer.
Loads a .PSC file and prints groups and players.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from psc.core.errors import PSCError
from psc.dump import config_to_json_dict, players_to_json_dict
from psc.engine import PermissionConfig
from psc.settings import load_settings
from psc.source import load_config_file

logger = logging.getLogger(__name__)

DEMO_GROUP = "VIP"
DEMO_PLAYER = "Exampleuser"


def print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


def run_demo(cfg: PermissionConfig) -> None:
    """Print the VIP group, add an example player, print it again."""
    print_lines(cfg.get_players(DEMO_GROUP))
    print("----")
    cfg.add_player(DEMO_PLAYER, DEMO_GROUP)
    print_lines(cfg.get_players(DEMO_GROUP))


def show_players(players: List[str], *, dump_json: bool, **query: object) -> None:
    if dump_json:
        print(json.dumps(players_to_json_dict(players, **query), indent=2, sort_keys=False))
        return
    print_lines(players)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Inspect a Permission System Config (.PSC) file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List all groups
  python main.py --list-groups

  # Players of one group
  python main.py --group VIP

  # Players holding any of the given permissions
  python main.py --permission vip --permission staff

  # Add a player in memory and show the group afterwards
  python main.py --add-player Dave --to VIP
        """,
    )
    parser.add_argument("--file", "-f", help="Path to the .PSC file (default: $PSC_FILE or Permissions.PSC)")
    parser.add_argument("--list-groups", action="store_true", help="Print all group names")
    parser.add_argument("--group", metavar="NAME", help="Print the players of a group")
    parser.add_argument(
        "--permission",
        "-p",
        action="append",
        metavar="PERM",
        help="Print players holding any of these permissions (repeatable)",
    )
    parser.add_argument("--add-player", metavar="ID", help="Add a player to the group given by --to (not saved)")
    parser.add_argument("--to", metavar="GROUP", help="Target group for --add-player")
    parser.add_argument(
        "--dump-json", action="store_true", help="Print JSON to stdout instead of one name per line"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", stream=sys.stderr
    )

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.add_player and not args.to:
        parser.error("--add-player requires --to GROUP")

    path = args.file or settings.config_file
    try:
        cfg = load_config_file(path, encoding=settings.encoding)
    except (OSError, ValueError, LookupError) as e:
        # Missing file, undecodable bytes, unknown encoding.
        print(f"Error reading {path}: {e}", file=sys.stderr)
        return 1
    logger.debug("loaded %s", path)

    try:
        if args.add_player:
            added = cfg.add_player(args.add_player, args.to)
            if not added:
                print(f"{args.add_player} is already in {args.to}", file=sys.stderr)
            show_players(cfg.get_players(args.to), dump_json=args.dump_json, group=args.to)
            return 0

        if args.group:
            show_players(cfg.get_players(args.group), dump_json=args.dump_json, group=args.group)
            return 0

        if args.permission:
            show_players(
                cfg.get_players(set(args.permission)),
                dump_json=args.dump_json,
                permissions=sorted(set(args.permission)),
            )
            return 0

        if args.list_groups:
            if args.dump_json:
                print(json.dumps(config_to_json_dict(cfg), indent=2, sort_keys=False))
            else:
                print_lines(sorted(cfg.get_groups()))
            return 0

        if args.dump_json:
            print(json.dumps(config_to_json_dict(cfg), indent=2, sort_keys=False))
            return 0

        if DEMO_GROUP in cfg:
            run_demo(cfg)
            return 0

        # No arguments provided
        parser.print_help()
        return 0

    except PSCError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
