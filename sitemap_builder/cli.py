#!/usr/bin/env python3
"""
Command line entry point for sitemap-builder.

Usage:
    sitemap-builder generate --base-url https://example.com/ --urls-file urls.txt
    sitemap-builder generate --base-url https://example.com/ --urls-file urls.txt --gzip --update-robots --submit
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .builder import SitemapBuilder
from .config import MAX_URLS_PER_SITEMAP, SitemapConfig
from .errors import ConfigurationError, SitemapError, ValidationError
from .submit import DEFAULT_TIMEOUT

LOG_FORMAT = "%(levelname)s | %(asctime)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, datefmt=LOG_DATEFMT)


def load_url_records(path: str) -> list[list[str]]:
    """
    Read ``loc [lastmod [changefreq [priority]]]`` records, one per line.

    Blank lines and ``#`` comments are skipped.
    """
    file_path = Path(path).resolve()
    if not file_path.exists():
        raise ValueError(f"urls file not found: {file_path}")
    records = []
    for raw in file_path.read_text(encoding="utf-8").splitlines():
        value = raw.strip()
        if not value or value.startswith("#"):
            continue
        fields = value.split()
        if len(fields) > 4:
            raise ValueError(f"too many fields (max 4) in line: {value}")
        records.append(fields)
    return records


def config_from_args(args: argparse.Namespace) -> SitemapConfig:
    return SitemapConfig(
        sitemap_file_name=args.sitemap_file_name,
        sitemap_index_file_name=args.index_file_name,
        robots_file_name=args.robots_file_name,
        max_urls_per_sitemap=args.max_urls,
        create_gzip_file=args.gzip,
    )


def run_generate(args: argparse.Namespace) -> int:
    try:
        records = load_url_records(args.urls_file)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 2
    if not records:
        print("Error: urls-file is empty")
        return 2

    try:
        builder = SitemapBuilder(args.base_url, args.base_path, config_from_args(args))
        builder.add_urls(records)
        builder.create_sitemap()
    except (ConfigurationError, ValidationError) as exc:
        print(f"Error: {exc}")
        return 2
    except SitemapError as exc:
        print(f"Error: {exc}")
        return 1

    index = builder.sitemap_index
    print(f"Total URLs included: {len(builder.urls)}")
    print(f"Sitemap files: {len(builder.sitemaps)}")
    print(f"Sitemap index: {index.file_name if index else 'none'}")
    print(f"Sitemap URL: {builder.publication_target}")
    if index:
        for url in index.sitemap_urls:
            print(f"  member: {url}")

    if args.dry_run:
        for document in builder.to_array():
            print(f"  {document.file_name} ({document.size:,} bytes)")
        return 0

    for path in builder.write_sitemap():
        print(f"Wrote {path}")
    if args.update_robots:
        print(f"Robots file: {builder.update_robots()}")
    if args.submit:
        for result in builder.submit_sitemap(args.yahoo_app_id or None, timeout=args.timeout):
            status = result.status_code if result.status_code is not None else "failed"
            print(f"Ping {result.site}: {status} {result.message[:120]}".rstrip())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate XML sitemaps and a sitemap index.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_generate = sub.add_parser("generate", help="Generate sitemap XML from a URL list")
    p_generate.add_argument("--base-url", required=True, help="Site URL ending with /, e.g. https://example.com/")
    p_generate.add_argument(
        "--urls-file",
        required=True,
        help="Newline-delimited records: loc [lastmod [changefreq [priority]]]",
    )
    p_generate.add_argument("--base-path", default=".", help="Directory for sitemap and robots files")
    p_generate.add_argument("--sitemap-file-name", default="sitemap.xml")
    p_generate.add_argument("--index-file-name", default="sitemap-index.xml")
    p_generate.add_argument("--robots-file-name", default="robots.txt")
    p_generate.add_argument(
        "--max-urls",
        type=int,
        default=MAX_URLS_PER_SITEMAP,
        help=f"URLs per sitemap file (max {MAX_URLS_PER_SITEMAP})",
    )
    p_generate.add_argument("--gzip", action="store_true", help="Also write a compressed copy of a single sitemap")
    p_generate.add_argument("--update-robots", action="store_true", help="Rewrite Sitemap: lines in robots.txt")
    p_generate.add_argument("--submit", action="store_true", help="Ping search engines with the sitemap URL")
    p_generate.add_argument("--yahoo-app-id", default="", help="Optional Yahoo application id for the ping")
    p_generate.add_argument("--timeout", type=int, default=DEFAULT_TIMEOUT)
    p_generate.add_argument("--dry-run", action="store_true", help="Build in memory and list files without writing")
    p_generate.set_defaults(func=run_generate)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
