"""
File staging for the add-product form.
Files are checked against the upload channel limits when selected and
only uploaded when the form is submitted.
"""

import logging
from typing import Iterable, List

from ..models.form import ProductFormState
from ..models.product import StagedFile
from .errors import StagingError
from .notifications import NotificationCenter
from .uploader import PRODUCT_IMAGE_CHANNEL, get_upload_channel

logger = logging.getLogger(__name__)


def stage_files(
    form: ProductFormState,
    files: Iterable[StagedFile],
    notifier: NotificationCenter,
    channel: str = PRODUCT_IMAGE_CHANNEL,
) -> List[str]:
    """
    Add files to the form's staged list.

    Files that break the channel limits (type, size, total count) are
    skipped and reported with an error notification each. Accepted files
    keep their selection order.

    Args:
        form: Form whose staged list is extended
        files: Newly selected files
        notifier: Receives one error notification per rejected file
        channel: Upload channel whose limits apply

    Returns:
        Rejection messages (empty if every file was staged)

    Raises:
        StagingError: If the form is busy submitting
    """
    if form.is_loading:
        raise StagingError("Cannot change images while the product is being added")

    policy = get_upload_channel(channel)
    rejections: List[str] = []

    for file in files:
        reason = policy.rejection_reason(file)
        if reason is None and len(form.staged_files) >= policy.max_files:
            reason = f"{file.filename}: at most {policy.max_files} files allowed"

        if reason:
            rejections.append(reason)
            notifier.error(reason)
            continue

        form.staged_files.append(file)

    logger.debug(
        f"Staged files: {len(form.staged_files)} total, {len(rejections)} rejected"
    )
    return rejections


def remove_staged_file(form: ProductFormState, index: int) -> StagedFile:
    """Remove and return the staged file at ``index``."""
    if form.is_loading:
        raise StagingError("Cannot change images while the product is being added")
    try:
        return form.staged_files.pop(index)
    except IndexError:
        raise StagingError(f"No staged file at position {index}")


def clear_staged_files(form: ProductFormState) -> None:
    if form.is_loading:
        raise StagingError("Cannot change images while the product is being added")
    form.staged_files = []
