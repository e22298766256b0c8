"""ClientGallery: client-facing photo galleries behind a command/query bus."""

__version__ = "0.1.0"
