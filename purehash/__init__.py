"""SHA-1 and SHA-256 message digests in pure Python."""

__version__ = "0.1.0"
__all__ = ["sha1", "sha256", "words"]