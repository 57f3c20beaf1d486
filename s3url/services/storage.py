import logging
from pathlib import Path

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from s3url.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """An S3 call failed; the message is the SDK's own."""


class StorageService:
    """S3 client bound to one credential profile."""

    def __init__(self, profile: str | None = None, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.profile = profile
        endpoint = str(self.settings.s3_endpoint).rstrip("/") if self.settings.s3_endpoint else None
        try:
            session = boto3.session.Session(profile_name=profile)
            self.client = session.client(
                "s3",
                endpoint_url=endpoint,
                region_name=self.settings.s3_region,
                config=Config(signature_version="s3v4"),
            )
        except BotoCoreError as exc:
            raise StorageError(str(exc)) from exc

    def upload_file(self, path: Path, bucket: str, key: str) -> None:
        logger.debug("Uploading %s to s3://%s/%s", path, bucket, key)
        with path.open("rb") as body:
            try:
                self.client.put_object(Bucket=bucket, Key=key, Body=body)
            except (BotoCoreError, ClientError) as exc:
                raise StorageError(str(exc)) from exc

    def create_presigned_get(self, bucket: str, key: str, duration_minutes: int) -> str:
        expires_in = duration_minutes * 60
        logger.debug("Presigning s3://%s/%s for %ss", bucket, key, expires_in)
        try:
            return self.client.generate_presigned_url(
                "get_object",
                Params={"Bucket": bucket, "Key": key},
                ExpiresIn=expires_in,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(str(exc)) from exc
