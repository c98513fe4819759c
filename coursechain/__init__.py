"""In-memory course progress, certificate, batch certificate and reward token ledgers."""

__version__ = "0.1.0"