"""Backend package for the Dragon Hatchery API.

This package provides the FastAPI web server that exposes the genetics core:
catalog inspection, wild dragon creation, breeding and phenotype resolution.
"""

__version__ = "1.0.0"
