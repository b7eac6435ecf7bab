"""
Image upload service.

This module defines the upload channels (named upload destinations with
their file limits) and the Google Cloud Storage uploader used to store
product images.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Sequence
from uuid import uuid4

from google.cloud import storage

from ..models.product import MAX_IMAGE_SIZE_BYTES, MAX_PRODUCT_IMAGES, StagedFile, UploadedImageRef
from .errors import UploadError

logger = logging.getLogger(__name__)

PRODUCT_IMAGE_CHANNEL = "productImage"


@dataclass(frozen=True)
class UploadChannel:
    """
    Named upload destination and the limits it accepts.

    Attributes:
        name: Channel name, also used as the object key prefix
        max_files: Maximum number of files per batch
        max_file_size: Maximum size of one file in bytes
        accepted_type_prefix: Required content type prefix (e.g. "image/")
    """

    name: str
    max_files: int
    max_file_size: int
    accepted_type_prefix: str = "image/"

    def rejection_reason(self, file: StagedFile) -> Optional[str]:
        """Return why a single file is not accepted, or None if it is."""
        if not file.content_type.startswith(self.accepted_type_prefix):
            return f"{file.filename}: file type must be {self.accepted_type_prefix}*"
        if file.size > self.max_file_size:
            max_mb = self.max_file_size / (1024 * 1024)
            return f"{file.filename}: file is larger than {max_mb:g} MB"
        if file.size == 0:
            return f"{file.filename}: file is empty"
        return None

    def check(self, files: Sequence[StagedFile]) -> None:
        """
        Check a whole batch against the channel limits.

        Raises:
            UploadError: If the batch is too large or any file is rejected
        """
        if len(files) > self.max_files:
            raise UploadError(
                f"Too many files: at most {self.max_files} allowed",
                details={"channel": self.name, "count": len(files)},
            )
        for file in files:
            reason = self.rejection_reason(file)
            if reason:
                raise UploadError(reason, details={"channel": self.name})


UPLOAD_CHANNELS: Dict[str, UploadChannel] = {
    PRODUCT_IMAGE_CHANNEL: UploadChannel(
        name=PRODUCT_IMAGE_CHANNEL,
        max_files=MAX_PRODUCT_IMAGES,
        max_file_size=MAX_IMAGE_SIZE_BYTES,
    ),
}


def get_upload_channel(name: str) -> UploadChannel:
    """Look up an upload channel by name."""
    try:
        return UPLOAD_CHANNELS[name]
    except KeyError:
        raise UploadError(f"Unknown upload channel: {name}", details={"channel": name})


class Uploader(Protocol):
    """Upload service: stores a batch of staged files on a channel."""

    async def start_upload(
        self, channel: str, files: Sequence[StagedFile]
    ) -> List[UploadedImageRef]:
        ...


def _object_key(channel: str, filename: str) -> str:
    safe_name = re.sub(r"[^A-Za-z0-9._-]", "_", filename) or "file"
    return f"{channel}/{uuid4().hex}-{safe_name}"


class GCSUploader:
    """
    Uploads staged files to a Google Cloud Storage bucket.

    Each file becomes one object under ``<channel>/``; the returned
    references carry the object key and its public URL, in the same
    order as the input files. A failure on any file fails the whole
    batch and removes the objects already written for it.
    """

    def __init__(
        self,
        bucket_name: str,
        public_base_url: str = "https://storage.googleapis.com",
        client: Optional[storage.Client] = None,
    ):
        self.bucket_name = bucket_name
        self.public_base_url = public_base_url.rstrip("/")
        self._client = client

    @property
    def client(self) -> storage.Client:
        if self._client is None:
            self._client = storage.Client()
        return self._client

    def public_url(self, key: str) -> str:
        return f"{self.public_base_url}/{self.bucket_name}/{key}"

    async def start_upload(
        self, channel: str, files: Sequence[StagedFile]
    ) -> List[UploadedImageRef]:
        """
        Upload a batch of files.

        Args:
            channel: Upload channel name (e.g. "productImage")
            files: Staged files, in display order

        Returns:
            One UploadedImageRef per file, preserving order

        Raises:
            UploadError: If the batch violates the channel limits or GCS fails
        """
        upload_channel = get_upload_channel(channel)
        upload_channel.check(files)

        logger.info(
            f"Uploading {len(files)} file(s) to gs://{self.bucket_name}/{channel}/"
        )

        bucket = self.client.bucket(self.bucket_name)
        uploaded: List[UploadedImageRef] = []

        for file in files:
            key = _object_key(channel, file.filename)
            blob = bucket.blob(key)
            try:
                blob.upload_from_string(file.data, content_type=file.content_type)
            except Exception as e:
                logger.error(f"Failed to upload {file.filename} to GCS: {e}", exc_info=True)
                self._discard(bucket, uploaded)
                raise UploadError(
                    "Failed to upload images.",
                    details={"channel": channel, "file": file.filename},
                ) from e

            uploaded.append(UploadedImageRef.from_upload(key, self.public_url(key)))
            logger.debug(f"Uploaded {file.filename} ({file.size / 1024:.1f} KB) as {key}")

        logger.info(f"Successfully uploaded {len(uploaded)} file(s) to GCS")
        return uploaded

    def _discard(self, bucket, uploaded: List[UploadedImageRef]) -> None:
        """Delete objects written earlier in a failed batch."""
        for ref in uploaded:
            try:
                bucket.blob(ref.id).delete()
            except Exception as e:
                logger.warning(f"Could not remove orphaned upload {ref.id}: {e}")
