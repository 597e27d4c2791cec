"""Tourist spot browsing core: catalog, filtering, favorites and language selection."""

__version__ = "0.1.0"
