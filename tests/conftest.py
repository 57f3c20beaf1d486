import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from s3url import cli
from s3url.core.config import get_settings
from s3url.services import storage as storage_service


class DummyStorage(storage_service.StorageService):
    """Records calls instead of talking to S3."""

    instances: list["DummyStorage"] = []
    fail_presign = False

    def __init__(self, profile=None, settings=None) -> None:  # type: ignore[super-init-not-called]
        self.settings = settings or get_settings()
        self.profile = profile
        self.calls: list[tuple] = []
        self.uploaded_bytes: bytes | None = None
        DummyStorage.instances.append(self)

    def upload_file(self, path, bucket, key):  # type: ignore[override]
        with path.open("rb") as fh:
            self.uploaded_bytes = fh.read()
        self.calls.append(("upload", path, bucket, key))

    def create_presigned_get(self, bucket, key, duration_minutes):  # type: ignore[override]
        self.calls.append(("presign", bucket, key, duration_minutes))
        if self.fail_presign:
            raise storage_service.StorageError("An error occurred (AccessDenied)")
        return f"https://example.com/get/{bucket}/{key}?expires={duration_minutes * 60}"


@pytest.fixture(autouse=True)
def configure_environment(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "ap-northeast-1")
    for name in ("AWS_PROFILE", "AWS_SESSION_TOKEN", "AWS_ENDPOINT_URL", "AWS_ENDPOINT_URL_S3"):
        monkeypatch.delenv(name, raising=False)
    for name in ("S3URL_DURATION", "S3_ENDPOINT_URL", "S3_REGION", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def dummy_storage(monkeypatch):
    DummyStorage.instances = []
    monkeypatch.setattr(cli, "StorageService", DummyStorage)
    return DummyStorage
