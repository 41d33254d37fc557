"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path


def main() -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(prog="hustle-finder", description="Income opportunity discovery and ranking")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to settings YAML (weights, thresholds, cache, providers)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: from settings, INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # discover
    discover_parser = subparsers.add_parser("discover", help="Discover and rank opportunities for a profile")
    discover_parser.add_argument(
        "--profile",
        type=Path,
        required=True,
        help="Path to profile YAML",
    )
    discover_parser.add_argument(
        "--content",
        type=Path,
        default=None,
        help="Optional content pool YAML (success stories, learning resources)",
    )
    discover_parser.add_argument(
        "--top",
        type=int,
        default=None,
        help="Max opportunities in the result (default: all)",
    )
    discover_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write result JSON to file (default: stdout)",
    )

    # sources
    sources_parser = subparsers.add_parser("sources", help="List opportunity sources")
    sources_parser.add_argument(
        "--json",
        action="store_true",
        help="Print source stats as JSON",
    )

    args = parser.parse_args()

    if args.command == "discover":
        _run_discover(args)
    elif args.command == "sources":
        _run_sources(args)
    else:
        parser.print_help()


def _load_settings(args: argparse.Namespace):
    from hustle_finder.config import EngineSettings

    settings = EngineSettings.load(args.config)
    level = (args.log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return settings


def _run_discover(args: argparse.Namespace) -> None:
    """Run discover command."""
    from hustle_finder.content import ContentPool
    from hustle_finder.engine import DiscoveryEngine, DiscoveryError
    from hustle_finder.models.profile import UserDiscoveryInput

    settings = _load_settings(args)
    if args.top is not None:
        if args.top < 1:
            raise SystemExit("--top must be at least 1")
        settings = settings.model_copy(update={"max_results": args.top})

    profile = UserDiscoveryInput.from_yaml(args.profile)
    content = ContentPool.from_yaml(args.content) if args.content else None
    engine = DiscoveryEngine(settings=settings, content=content)

    try:
        result = engine.discover_sync(profile)
    except DiscoveryError as e:
        print(f"Discovery failed: {e}", file=sys.stderr)
        raise SystemExit(1)

    output = json.dumps(result.model_dump(mode="json"), indent=2, default=str)

    if args.output:
        args.output.write_text(output, encoding="utf-8")
        m = result.metrics
        print(
            f"Discovered {len(result.opportunities)} opportunities from {m.sources_searched} sources "
            f"({m.sources_failed} failed, wrote to {args.output})"
        )
    else:
        print(output)


def _run_sources(args: argparse.Namespace) -> None:
    """Run sources command."""
    from hustle_finder.providers.registry import ProviderRegistry

    settings = _load_settings(args)
    registry = ProviderRegistry.default(settings)
    stats = registry.stats()

    if args.json:
        print(json.dumps([s.model_dump(mode="json") for s in stats.values()], indent=2, default=str))
        return
    for source_id in ProviderRegistry.available_sources():
        s = stats[source_id]
        state = "enabled" if s.enabled else "disabled"
        print(f"  {source_id:<14} {s.name:<20} {state}")


if __name__ == "__main__":
    main()
