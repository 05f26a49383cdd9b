"""CLI entrypoint for inspecting and clearing the resolver disk cache."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from assetwise import __version__
from assetwise.config import AssetwiseConfig, load_config
from assetwise.exceptions import CacheWriteError, ConfigError
from assetwise.model import CacheInfo
from assetwise.resolver import DiskCache

CLI_DESCRIPTION = "Inspect and maintain the Assetwise resolver cache."


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="assetwise", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    cache = subparsers.add_parser("cache", help="Manage cached workspace resolutions")
    cache.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root used to find assetwise.yaml")
    cache.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    cache_actions = cache.add_subparsers(dest="action", required=True)

    listing = cache_actions.add_parser("list", help="List cached workspaces")
    listing.add_argument("--json", action="store_true", help="Emit JSON instead of a table")
    cache_actions.add_parser("clear-expired", help="Remove expired cache files")
    cache_actions.add_parser("clear", help="Remove every cache file")
    cache_actions.add_parser("evict", help="Remove the cache file of the configured workspace")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return a process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        return _handle_cache(args, config)
    except CacheWriteError as exc:
        print(f"Cache error: {exc}", file=sys.stderr)
        return 1


def _handle_cache(args: argparse.Namespace, config: AssetwiseConfig) -> int:
    disk = DiskCache(config.cache_dir, config.cache_ttl_hours)

    if args.action == "list":
        infos = disk.list_cached_workspaces()
        if args.json:
            print(json.dumps([info.to_dict() for info in infos], indent=2, sort_keys=True))
        else:
            print(_render_table(infos))
        return 0

    if args.action == "clear-expired":
        removed = disk.clear_expired()
        print(f"Removed {removed} expired cache file(s).")
        return 0

    if args.action == "clear":
        disk.clear_all()
        print(f"Cleared cache directory {disk.cache_dir}.")
        return 0

    if not config.has_workspace:
        print("Configuration error: workspace_id and site_url are required to evict", file=sys.stderr)
        return 2
    removed_file = disk.evict(config.workspace_id, config.site_url)
    print("Evicted cache for workspace." if removed_file else "No cache file for workspace.")
    return 0


def _render_table(infos: list[CacheInfo]) -> str:
    if not infos:
        return "No cached workspaces."
    lines = []
    for info in sorted(infos, key=lambda i: i.cached_at, reverse=True):
        status = "expired" if info.is_expired else "fresh"
        lines.append(
            f"{info.workspace_id}  {info.site_url}  schemas={info.schema_count} "
            f"types={info.object_type_count}  {status}  expires={info.expires_at.isoformat()}  "
            f"{info.size_bytes}B  {info.file_name}"
        )
    return "\n".join(lines)


if __name__ == "__main__":
    raise SystemExit(main())
