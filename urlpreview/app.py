import argparse
from pathlib import Path

from . import __version__
from .env import load_env, log_dir, log_level
from .logger import get_logger
from .models import Base
from .preview import (
    IFRAME_ALLOW,
    REQUEST_SERVICE_URL,
    SHARE_LINK_HELP_URL,
    build_preview,
    supported_services_text,
)
from .resolver import SERVICES, match_service
from .schema import validate_settings_payload
from .settings import use_settings
from .storage import GlobalConfig, load_json_object


def cmd_resolve(args: argparse.Namespace) -> None:
    logger = get_logger()
    matched = match_service(args.url)
    logger.record_resolution(matched[0].key if matched else None)
    if matched is None:
        logger.debug("No service matched", candidate=args.url)
        print("No preview")
        raise SystemExit(1)
    service, url = matched
    logger.debug("Resolved preview", service=service.key, url=url)
    print(url)


def cmd_resolve_file(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    if not input_path.exists():
        raise SystemExit(f"Input file not found: {input_path}")
    logger = get_logger()
    total = resolved = unresolved = 0
    with input_path.open("r", encoding="utf-8") as f:
        for line in f:
            text = line.strip()
            if not text or text.startswith("#"):
                continue
            total += 1
            matched = match_service(text)
            if matched is None:
                logger.record_resolution(None)
                unresolved += 1
                print(f"[no-preview] {text}")
                continue
            service, url = matched
            logger.record_resolution(service.key)
            resolved += 1
            print(f"[{service.key}] {url}")
    print(f"Done. total={total} resolved={resolved} unresolved={unresolved}")
    logger.log_metrics_summary()


def cmd_preview(args: argparse.Namespace) -> None:
    result = build_preview(args.value, args.field)
    get_logger().record_resolution(result.service if result.has_preview else None)
    print(f"Status: {result.status}")
    if result.message:
        print(f"Message: {result.message}")
    if result.has_preview:
        print(f"Src: {result.url}")
        print(f"Allow: {IFRAME_ALLOW}")


def cmd_services(args: argparse.Namespace) -> None:
    print("Supported services (in match order):")
    for i, service in enumerate(SERVICES, start=1):
        print(f" {i}. {service.name} [{service.key}]")
    print()
    print(f"Previews are supported for these services: {supported_services_text()}")
    print(f"Share links: {SHARE_LINK_HELP_URL}")
    print(f"Request a new service: {REQUEST_SERVICE_URL}")


def cmd_validate_settings(args: argparse.Namespace) -> None:
    config_path = Path(args.config)
    base_path = Path(args.base)
    for path in (config_path, base_path):
        if not path.exists():
            raise SystemExit(f"Input file not found: {path}")
    try:
        payload = load_json_object(config_path)
        base = Base.from_dict(load_json_object(base_path))
    except ValueError as e:
        raise SystemExit(str(e))

    errors = validate_settings_payload(payload)
    if not errors:
        result = use_settings(GlobalConfig(payload), base)
        if not result.is_valid:
            errors.append(result.message)
    if errors:
        get_logger().warning("Invalid settings", config=str(config_path), errors=errors)
        print("Invalid:")
        for e in errors:
            print(f" - {e}")
        raise SystemExit(2)
    print("Valid")


def main(argv=None):
    # Load .env if present (URLPREVIEW_LOG_LEVEL, URLPREVIEW_LOG_DIR)
    load_env()
    directory = log_dir()
    get_logger(level=log_level(), log_dir=directory, enable_file=directory is not None)

    parser = argparse.ArgumentParser(prog="urlpreview", description="Resolve cell text into embeddable preview URLs")
    parser.add_argument("--version", action="store_true", help="Show version")

    subparsers = parser.add_subparsers(dest="command")
    res = subparsers.add_parser("resolve", help="Resolve one URL (or any cell text) to an embed URL")
    res.add_argument("--url", required=True, help="Cell text to resolve")
    res.set_defaults(func=cmd_resolve)

    resf = subparsers.add_parser("resolve-file", help="Resolve every line of a text file")
    resf.add_argument("--input", required=True, help="Text file with one candidate per line")
    resf.set_defaults(func=cmd_resolve_file)

    prv = subparsers.add_parser("preview", help="Show what the preview pane displays for a cell value")
    prv.add_argument("--value", default="", help="Cell value as a string")
    prv.add_argument("--field", default="URL", help="Field name used in messages (default: URL)")
    prv.set_defaults(func=cmd_preview)

    svc = subparsers.add_parser("services", help="List supported services in match order")
    svc.set_defaults(func=cmd_services)

    val = subparsers.add_parser("validate-settings", help="Validate block settings against a base description")
    val.add_argument("--config", required=True, help="Path to settings JSON (isEnforced, urlTableId, urlFieldId)")
    val.add_argument("--base", required=True, help="Path to base JSON with tables and fields")
    val.set_defaults(func=cmd_validate_settings)

    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        args.func(args)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
