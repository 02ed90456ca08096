"""Quality Function Deployment (House of Quality) analysis engine."""

__version__ = "0.1.0"
