"""`az` CLI operations used by post-deploy hooks.

Only the static website flow lives here: enabling static website hosting on
a storage account and uploading a local folder into its ``$web`` container.
Failures are reported, never retried; retry policy belongs to whoever runs
the deployment.
"""

import subprocess
from typing import List, Optional

from ..exceptions import AzCliError, PostDeployError
from ..logging_config import get_logger
from ..timeout_config import Timeouts

logger = get_logger(__name__)

STATIC_WEBSITE_CONTAINER = "$web"


def run_az(args: List[str], timeout: int) -> str:
    """Run an `az` command and return its stdout.

    Args:
        args: Arguments after ``az``
        timeout: Timeout in seconds

    Returns:
        Stripped stdout of the command

    Raises:
        AzCliError: If the command cannot start, times out or exits non-zero
    """
    cmd = ["az", *args]
    logger.debug(f"Running {' '.join(cmd)}")

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise AzCliError(
            "az CLI executable not found", command=cmd, cause=e
        ) from e
    except subprocess.TimeoutExpired as e:
        raise AzCliError(
            f"az command timed out after {timeout} seconds", command=cmd, cause=e
        ) from e

    if result.returncode != 0:
        raise AzCliError(
            f"az command failed: {result.stderr.strip()}",
            command=cmd,
            returncode=result.returncode,
        )

    return result.stdout.strip()


def enable_static_website(
    account_name: str, index_page: str, error_page: Optional[str] = None
) -> str:
    """Enable static website hosting on a storage account."""
    args = [
        "storage",
        "blob",
        "service-properties",
        "update",
        "--account-name",
        account_name,
        "--static-website",
        "--index-document",
        index_page,
    ]
    if error_page:
        args.extend(["--404-document", error_page])

    logger.info(f"Enabling static website for storage account {account_name}")
    return run_az(args, timeout=Timeouts.AZ_STATIC_WEBSITE)


def batch_upload_static_website(account_name: str, content_path: str) -> str:
    """Upload a local folder into the account's ``$web`` container."""
    args = [
        "storage",
        "blob",
        "upload-batch",
        "--account-name",
        account_name,
        "--destination",
        STATIC_WEBSITE_CONTAINER,
        "--source",
        content_path,
    ]

    logger.info(
        f"Uploading {content_path} to {STATIC_WEBSITE_CONTAINER} "
        f"for storage account {account_name}"
    )
    return run_az(args, timeout=Timeouts.AZ_UPLOAD_BATCH)


def deploy_static_website(
    account_name: str,
    index_page: str,
    error_page: Optional[str],
    content_path: str,
) -> str:
    """Enable a static website and upload its content as one unit.

    Both steps always run, in order. On success the result is both outputs
    joined by ``", "``.

    Raises:
        PostDeployError: If either step failed; ``step_errors`` holds every
            failure message
    """
    outputs: List[str] = []
    step_errors: List[str] = []

    try:
        outputs.append(enable_static_website(account_name, index_page, error_page))
    except AzCliError as e:
        logger.error(f"Enabling static website for {account_name} failed: {e}")
        step_errors.append(f"enable static website: {e.message}")

    try:
        outputs.append(batch_upload_static_website(account_name, content_path))
    except AzCliError as e:
        logger.error(f"Uploading static website content for {account_name} failed: {e}")
        step_errors.append(f"upload content: {e.message}")

    if step_errors:
        raise PostDeployError(
            "Static website deployment failed: " + "; ".join(step_errors),
            resource_name=account_name,
            step_errors=step_errors,
        )

    return ", ".join(outputs)


__all__ = [
    "STATIC_WEBSITE_CONTAINER",
    "batch_upload_static_website",
    "deploy_static_website",
    "enable_static_website",
    "run_az",
]
