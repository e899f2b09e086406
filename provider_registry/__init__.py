"""Read-only Terraform Provider Registry backed by fixture data or GitLab Releases."""

__version__ = "0.1.0"
