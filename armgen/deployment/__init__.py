"""Post-deploy operations run after a template has been accepted."""

from .az_cli import (
    batch_upload_static_website,
    deploy_static_website,
    enable_static_website,
)

__all__ = [
    "batch_upload_static_website",
    "deploy_static_website",
    "enable_static_website",
]
