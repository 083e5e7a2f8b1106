"""Command-line access to catalog search.

Reads a catalog from a JSON array of record objects and prints results as
JSON. Unknown record keys (price, condition, ...) are kept as extra fields
and can be used with ``--filter`` and ``--sort-by``.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path
import sys
from typing import Any

import orjson
from pydantic import ValidationError

from catalog_search.config import Settings
from catalog_search.domain.search import SEARCH_FIELDS, SearchableRecord, SearchOptions
from catalog_search.observability.logging import configure_logging
from catalog_search.service_layer.search_service import SORT_ORDERS, CatalogSearchService


def load_catalog(path: Path) -> list[SearchableRecord]:
    """Load records from a JSON array file.

    Raises:
        ValueError: The file is unreadable, not a JSON array of objects, or a
            record fails validation.
    """
    try:
        payload = orjson.loads(path.read_bytes())
    except OSError as exc:
        raise ValueError(f"cannot read catalog {path}: {exc}") from exc
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"catalog {path} is not valid JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise ValueError(f"catalog {path} must contain a JSON array of records")

    records: list[SearchableRecord] = []
    for index, entry in enumerate(payload):
        if not isinstance(entry, dict):
            raise ValueError(f"record #{index} in {path} is not an object")
        try:
            records.append(SearchableRecord.from_mapping(entry))
        except ValidationError as exc:
            raise ValueError(f"record #{index} in {path} is invalid: {exc}") from exc
    return records


def _parse_filter(raw: str) -> tuple[str, Any]:
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"filter must look like KEY=VALUE, got '{raw}'")
    try:
        parsed: Any = orjson.loads(value)
    except orjson.JSONDecodeError:
        parsed = value
    return key.strip(), parsed


def _parse_fields(raw: str) -> tuple[str, ...]:
    fields = tuple(name.strip().lower() for name in raw.split(",") if name.strip())
    unknown = [name for name in fields if name not in SEARCH_FIELDS]
    if not fields or unknown:
        raise argparse.ArgumentTypeError(f"fields must be a comma-separated subset of {', '.join(SEARCH_FIELDS)}")
    return fields


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catalog-search", description=__doc__)
    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Rank catalog records against a query")
    search_parser.add_argument("catalog", type=Path, help="Path to a JSON array of records")
    search_parser.add_argument("query", help="Query in Bengali or Latin script")
    search_parser.add_argument("--threshold", type=float, default=None, help="Ranking threshold in [0, 1]")
    search_parser.add_argument(
        "--fields",
        type=_parse_fields,
        default=None,
        help="Comma-separated fields to probe (default: all)",
    )
    search_parser.add_argument(
        "--no-transliteration",
        dest="include_transliteration",
        action="store_false",
        default=None,
        help="Skip script-conversion expansion",
    )
    search_parser.add_argument(
        "--no-phonetic",
        dest="include_phonetic",
        action="store_false",
        default=None,
        help="Skip phonetic expansion of Latin queries",
    )
    search_parser.add_argument("--sort-by", choices=SORT_ORDERS, default="relevance", help="Result order")
    search_parser.add_argument(
        "--filter",
        action="append",
        dest="filters",
        type=_parse_filter,
        default=[],
        help="Keep records whose field equals VALUE (KEY=VALUE, repeatable)",
    )
    search_parser.add_argument("--limit", type=int, default=None, help="Maximum results to print")

    suggest_parser = subparsers.add_parser("suggest", help="Suggest completions for a partial query")
    suggest_parser.add_argument("catalog", type=Path, help="Path to a JSON array of records")
    suggest_parser.add_argument("partial", help="Partial query")
    suggest_parser.add_argument("--max", dest="max_suggestions", type=int, default=None, help="Maximum suggestions")

    highlight_parser = subparsers.add_parser("highlight", help="Highlight query matches in text")
    highlight_parser.add_argument("text", help="Display text")
    highlight_parser.add_argument("query", help="Query to highlight")
    highlight_parser.add_argument("--style", choices=("html", "plain"), default=None, help="Marker style")

    return parser


def _build_options(args: argparse.Namespace, defaults: SearchOptions) -> SearchOptions:
    updates: dict[str, Any] = {}
    if args.threshold is not None:
        updates["threshold"] = args.threshold
    if args.fields is not None:
        updates["search_fields"] = args.fields
    if args.include_transliteration is not None:
        updates["include_transliteration"] = args.include_transliteration
    if args.include_phonetic is not None:
        updates["include_phonetic"] = args.include_phonetic
    # model_validate re-runs field validation, unlike model_copy(update=...)
    return SearchOptions.model_validate({**defaults.model_dump(), **updates})


def _emit(payload: Any) -> None:
    sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8"))
    sys.stdout.write("\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level, settings.log_json, stream=sys.stderr)

    if args.command == "highlight":
        style = args.style or settings.highlight_style
        settings = settings.model_copy(update={"highlight_style": style})
        print(CatalogSearchService(settings).highlight(args.text, args.query))
        return 0

    try:
        records = load_catalog(args.catalog)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    service = CatalogSearchService(settings)

    if args.command == "suggest":
        _emit(service.suggest(records, args.partial, args.max_suggestions))
        return 0

    try:
        options = _build_options(args, service.default_options)
    except ValidationError as exc:
        print(f"Error: invalid search options: {exc}", file=sys.stderr)
        return 1

    response = service.search(
        records,
        args.query,
        options=options,
        filters=dict(args.filters),
        sort_by=args.sort_by,
        limit=args.limit,
    )
    _emit(response.model_dump(mode="json"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
