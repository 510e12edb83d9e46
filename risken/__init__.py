"""Client for the RISKEN security monitoring HTTP API: findings, alerts, projects, reports, AWS, code scans and data sources."""

__version__ = "0.0.1"