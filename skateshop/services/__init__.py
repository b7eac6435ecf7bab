"""
Services
Upload, mutation and submission services for the add-product form.
"""

from .errors import MutationError, StagingError, SubmissionError, UploadError
from .file_staging import clear_staged_files, remove_staged_file, stage_files
from .mutator import CreatedProduct, DatabaseProductMutator, ProductMutator
from .notifications import NotificationCenter
from .product_submission import ProductSubmissionWorkflow, SubmissionOutcome
from .uploader import (
    PRODUCT_IMAGE_CHANNEL,
    UPLOAD_CHANNELS,
    GCSUploader,
    UploadChannel,
    Uploader,
    get_upload_channel,
)

__all__ = [
    "MutationError",
    "StagingError",
    "SubmissionError",
    "UploadError",
    "clear_staged_files",
    "remove_staged_file",
    "stage_files",
    "CreatedProduct",
    "DatabaseProductMutator",
    "ProductMutator",
    "NotificationCenter",
    "ProductSubmissionWorkflow",
    "SubmissionOutcome",
    "PRODUCT_IMAGE_CHANNEL",
    "UPLOAD_CHANNELS",
    "GCSUploader",
    "UploadChannel",
    "Uploader",
    "get_upload_channel",
]
