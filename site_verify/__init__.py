"""site_verify – pre-deployment checks for the generated academic website."""

__version__ = "0.1.0"
