from .source_uri import is_remote_uri, read_source_bytes, resolve_source_uri

__all__ = ["is_remote_uri", "read_source_bytes", "resolve_source_uri"]
