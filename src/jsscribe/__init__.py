"""jsscribe - locate documentable JavaScript functions and classes."""

try:
    from importlib.metadata import version

    __version__ = version("jsscribe")
except Exception:
    __version__ = "0.0.0.dev0+local"  # Fallback for development
