"""Print time-limited signed download URLs for S3 objects."""

__version__ = "0.1.0"
