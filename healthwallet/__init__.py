"""Health Wallet: personal health-record API."""

__version__ = "1.0.0"
