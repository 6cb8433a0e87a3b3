"""
Health check for provisioned macOS development machines: tools, config files, apps and identity.
"""

__all__ = ["catalog", "checker", "checks", "cli", "environment", "formatting"]
__version__ = "0.1.0"
