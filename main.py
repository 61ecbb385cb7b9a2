import json
import logging
import argparse
import sys

import yaml

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def load_profile(path):
    """Read a patient profile from a JSON or YAML file."""
    with open(path, 'r', encoding='utf-8') as f:
        if path.endswith(('.yaml', '.yml')):
            return yaml.safe_load(f)
        return json.load(f)


def create_tables():
    # Imported here so the engine is only built for commands that need it
    from database.init_db import init_db
    init_db()


def open_residence_uow():
    from database.uow import residence_uow
    return residence_uow()


def run_init_db(args):
    create_tables()
    return 0


def run_match(args):
    from core.config_loader import load_config
    from core.matcher.errors import MatchingError
    from core.matcher.service import MatchingEngine, MatchOptions
    from core.matcher.profile import parse_profile

    config = load_config()
    limit = args.limit if args.limit is not None else config.matching.default_limit
    if not 1 <= limit <= config.matching.max_limit:
        logger.error(f"--limit must be between 1 and {config.matching.max_limit}, got {limit}")
        return 2
    if args.offset < 0:
        logger.error(f"--offset must be >= 0, got {args.offset}")
        return 2

    try:
        profile = parse_profile(load_profile(args.profile))
        options = MatchOptions(
            limit=limit,
            offset=args.offset,
            require_availability=not args.include_unavailable
        )
        with open_residence_uow() as repo:
            page = MatchingEngine(repo, config=config.matching).find_matches(profile, options)
    except MatchingError as e:
        logger.error(f"Matching failed [{e.code.value}]: {e}")
        return 1

    output = {
        "matches": [m.to_dict() for m in page.matches],
        "total": page.total,
        "hasMore": page.has_more
    }
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="RPA Match command line")
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('init-db', help='Create database tables (retries while the DB starts)')

    match_parser = subparsers.add_parser('match', help='Rank residences for a profile file')
    match_parser.add_argument('--profile', required=True,
                              help='Path to a JSON or YAML patient profile')
    match_parser.add_argument('--limit', type=int, default=None,
                              help='Page size, 1 to matching.max_limit (defaults to matching.default_limit)')
    match_parser.add_argument('--offset', type=int, default=0)
    match_parser.add_argument('--include-unavailable', action='store_true',
                              help='Keep residences reporting zero available units')

    args = parser.parse_args(argv)

    if args.command == 'init-db':
        return run_init_db(args)
    return run_match(args)


if __name__ == "__main__":
    sys.exit(main())
