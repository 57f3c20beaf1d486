"""Command-line entry point: resolve the target object, optionally upload, print a signed URL."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from pydantic import ValidationError

from s3url.core.config import Settings, get_settings
from s3url.schemas import PresignRequest
from s3url.services.storage import StorageError, StorageService
from s3url.services.urls import InvalidURLError, parse_storage_url

logger = logging.getLogger(__name__)

USAGE = """\
%(prog)s https://s3-region.amazonaws.com/BUCKET/KEY [-d DURATION]
       %(prog)s s3://BUCKET/KEY [-d DURATION]
       %(prog)s -b BUCKET -k KEY [-d DURATION] [--profile NAME] [--upload PATH]"""


class UsageError(Exception):
    """The command line does not describe a single object to sign."""


class _ArgumentParser(argparse.ArgumentParser):
    # Every failure exits 1, argparse's own included.
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="s3url",
        usage=USAGE,
        description="Print a time-limited signed download URL for an S3 object.",
    )
    parser.add_argument("url", nargs="?", help="s3://BUCKET/KEY or https://ENDPOINT/BUCKET/KEY")
    parser.add_argument("-b", "--bucket", default="", help="Bucket name")
    parser.add_argument("-k", "--key", default="", help="Object key")
    parser.add_argument(
        "-d",
        "--duration",
        type=int,
        default=settings.default_duration,
        help=f"Valid duration in minutes (default: {settings.default_duration})",
    )
    parser.add_argument("--profile", default=None, help="AWS profile name")
    parser.add_argument("--upload", default=None, help="File to upload before signing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def parse_args(argv: list[str] | None = None, settings: Settings | None = None) -> argparse.Namespace:
    return build_parser(settings or get_settings()).parse_args(argv)


def resolve_request(args: argparse.Namespace) -> PresignRequest:
    """Turn parsed arguments into a validated :class:`PresignRequest`.

    A positional URL wins over ``--bucket``/``--key``. Raises
    :class:`UsageError` for a missing bucket, key or a non-positive duration,
    and lets :class:`InvalidURLError` propagate.
    """
    bucket, key = args.bucket, args.key
    if args.url:
        bucket, key = parse_storage_url(args.url)

    if not bucket:
        raise UsageError("Bucket name is required.")
    if not key:
        raise UsageError("Object key is required.")
    if args.duration <= 0:
        raise UsageError("Duration must be a positive number of minutes.")

    upload_path = Path(os.path.abspath(args.upload)) if args.upload else None

    return PresignRequest(
        bucket=bucket,
        key=key,
        duration_minutes=args.duration,
        profile=args.profile or None,
        upload_path=upload_path,
    )


def configure_logging(level: str, verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        raise SystemExit(1)

    args = parse_args(argv, settings)
    configure_logging(settings.log_level, args.verbose)

    try:
        request = resolve_request(args)
        logger.debug("Resolved request: %s", request)
        storage = StorageService(request.profile, settings)
        if request.upload_path is not None:
            storage.upload_file(request.upload_path, request.bucket, request.key)
            print(f"uploaded: {request.upload_path}", file=sys.stderr)
        signed_url = storage.create_presigned_get(
            request.bucket, request.key, request.duration_minutes
        )
    except (UsageError, InvalidURLError, StorageError, OSError) as exc:
        print(exc, file=sys.stderr)
        raise SystemExit(1)

    print(signed_url)


if __name__ == "__main__":  # pragma: no cover
    main()
