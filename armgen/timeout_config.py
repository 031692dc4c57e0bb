"""
Timeout configuration for the `az` CLI calls made by post-deploy hooks.

Timeout values are configurable via environment variables:
    - ARMGEN_TIMEOUT_STANDARD: service property updates (default: 60s)
    - ARMGEN_TIMEOUT_UPLOAD: content batch uploads (default: 1800s)
"""

import logging
import os
from typing import Final

logger = logging.getLogger(__name__)


def _get_timeout(env_var: str, default: int) -> int:
    """Get timeout value from environment variable or use default.

    Args:
        env_var: Environment variable name
        default: Default timeout in seconds

    Returns:
        Timeout value in seconds
    """
    value = os.environ.get(env_var)
    if value is not None:
        try:
            timeout = int(value)
            if timeout <= 0:
                logger.warning(
                    f"Invalid timeout value for {env_var}: {value}. "
                    f"Must be positive. Using default: {default}s"
                )
                return default
            return timeout
        except ValueError:
            logger.warning(
                f"Invalid timeout value for {env_var}: {value}. "
                f"Must be integer. Using default: {default}s"
            )
            return default
    return default


class Timeouts:
    """Timeout constants for `az` CLI operations, in seconds."""

    STANDARD: Final[int] = _get_timeout("ARMGEN_TIMEOUT_STANDARD", 60)
    AZ_STATIC_WEBSITE: Final[int] = STANDARD

    UPLOAD: Final[int] = _get_timeout("ARMGEN_TIMEOUT_UPLOAD", 1800)
    AZ_UPLOAD_BATCH: Final[int] = UPLOAD
