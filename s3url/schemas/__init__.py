from s3url.schemas.request import DEFAULT_DURATION_MINUTES, PresignRequest

__all__ = [
    "DEFAULT_DURATION_MINUTES",
    "PresignRequest",
]
