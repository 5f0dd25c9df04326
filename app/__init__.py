"""GitHub to Vercel deployment service."""

__version__ = "0.1.0"
