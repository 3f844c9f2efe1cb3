#!/usr/bin/env python3
"""googleapis-wire CLI - inspect and check wire payloads

Command-line tool for working with the schema registries:
- List the registered APIs and their schemas
- Decode a captured JSON payload into native values
- Check that a payload survives a wire -> native -> wire round trip
- Show which fields of a Discovery document need coercion

Usage:
    gapi-wire schemas [api]
    gapi-wire decode <api> <schema> [file]
    gapi-wire roundtrip <api> <schema> [file]
    gapi-wire discovery <file>

Examples:
    gapi-wire schemas deploymentmanager
    gapi-wire decode area120tables ListRowsResponse rows.json
    curl -s ... | gapi-wire roundtrip retail Product
    gapi-wire discovery ~/Downloads/retail-v2.json
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from apis import REGISTRIES, get_registry
from codec.errors import CoercionError
from coercion import FieldKind, Schema, registry_from_discovery, to_native, to_wire
from config import ConfigError, ConfigManager
from config.config_manager import LOG_LEVELS

logger = logging.getLogger(__name__)


def _read_json(path: Optional[str]) -> Any:
    if path in (None, "-"):
        return json.load(sys.stdin)
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _native_default(value: Any) -> Any:
    if isinstance(value, bytes):
        return f"<{len(value)} bytes: {value[:16].hex()}{'...' if len(value) > 16 else ''}>"
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _describe_field(field) -> str:
    kind = field.ref if field.kind is FieldKind.MESSAGE else field.kind.value
    if field.repeated:
        return f"list[{kind}]"
    if field.map:
        return f"map[{kind}]"
    return kind


def _print_schema(schema: Schema) -> None:
    print(f"  {schema.name}")
    for name, field in sorted(schema.fields.items()):
        print(f"      {name:<28} {_describe_field(field)}")


def cmd_schemas(args) -> int:
    """List APIs, or the schemas of one API."""
    if not args.api:
        for api, registry in sorted(REGISTRIES.items()):
            print(f"{api:<26} {registry.version:<10} {len(registry):>3} schemas")
        return 0

    registry = get_registry(args.api)
    print(f"{registry.api} {registry.version}")
    for name in registry.names():
        _print_schema(registry.get(name))
    return 0


def cmd_decode(args) -> int:
    """Decode a wire payload and print it with native values."""
    schema = get_registry(args.api).get(args.schema)
    native = to_native(schema, _read_json(args.file))
    print(json.dumps(native, indent=2, default=_native_default))
    return 0


def cmd_roundtrip(args) -> int:
    """Check that wire -> native -> wire reproduces the payload."""
    schema = get_registry(args.api).get(args.schema)
    wire = _read_json(args.file)
    again = to_wire(schema, to_native(schema, wire))
    logger.debug(f"Round trip of {args.schema} from {args.file or 'stdin'}")

    if again == wire:
        print(f"✓ {args.schema} round-trips unchanged")
        return 0

    print(f"❌ {args.schema} changed after round trip")
    print(json.dumps(again, indent=2))
    return 1


def cmd_discovery(args) -> int:
    """Show the coercible fields found in a Discovery document."""
    registry = registry_from_discovery(_read_json(args.file))
    print(f"{registry.api} {registry.version}: {len(registry)} schemas")
    for name in registry.names():
        schema = registry.get(name)
        if schema.fields or args.all:
            _print_schema(schema)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gapi-wire",
        description="Inspect Google API wire payloads against the schema registries",
    )
    parser.add_argument("--config-dir", type=Path, help="Configuration directory")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override the configured log level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    schemas = subparsers.add_parser("schemas", help="List APIs or the schemas of one API")
    schemas.add_argument("api", nargs="?", help="API name, e.g. retail")
    schemas.set_defaults(func=cmd_schemas)

    decode = subparsers.add_parser("decode", help="Decode a wire payload to native values")
    decode.add_argument("api")
    decode.add_argument("schema")
    decode.add_argument("file", nargs="?", help="JSON file (default: stdin)")
    decode.set_defaults(func=cmd_decode)

    roundtrip = subparsers.add_parser("roundtrip", help="Check a payload survives a round trip")
    roundtrip.add_argument("api")
    roundtrip.add_argument("schema")
    roundtrip.add_argument("file", nargs="?", help="JSON file (default: stdin)")
    roundtrip.set_defaults(func=cmd_roundtrip)

    discovery = subparsers.add_parser("discovery", help="Coercible fields of a Discovery document")
    discovery.add_argument("file")
    discovery.add_argument("--all", action="store_true", help="Also list schemas with no coercible fields")
    discovery.set_defaults(func=cmd_discovery)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ConfigManager(args.config_dir).load()
    except ConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    logging.basicConfig(level=args.log_level or config.log_level)

    try:
        return args.func(args)
    except CoercionError as e:
        print(f"❌ Coercion failed: {e}", file=sys.stderr)
    except KeyError as e:
        print(f"❌ {e.args[0]}", file=sys.stderr)
    except (OSError, ValueError) as e:
        print(f"❌ {e}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
