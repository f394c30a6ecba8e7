"""onixkit - typed, version-aware access to ONIX <Product> records."""

__version__ = "0.1.0"
