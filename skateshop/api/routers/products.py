"""
Product Endpoints
POST /api/v1/stores/{store_id}/products - Submit the add-product form.
GET /api/v1/products/categories - Categories for the category select.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status

from ...models.form import ProductFormState, SubmissionState
from ...models.product import ProductCategory, StagedFile
from ...services.file_staging import stage_files
from ...services.mutator import ProductMutator
from ...services.notifications import NotificationCenter
from ...services.product_submission import ProductSubmissionWorkflow
from ...services.uploader import PRODUCT_IMAGE_CHANNEL, Uploader, get_upload_channel
from ..dependencies import get_mutator, get_notifier, get_request_id, get_uploader
from ..errors import submission_error_status
from ..models.products import (
    CategoriesResponse,
    NotificationOut,
    ProductSubmissionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["products"])


@router.get("/products/categories", response_model=CategoriesResponse)
async def list_categories() -> CategoriesResponse:
    """List the allowed product categories."""
    return CategoriesResponse(categories=ProductCategory.values())


async def _read_upload(upload: UploadFile, max_size: int) -> StagedFile:
    # One byte past the limit is enough for staging to reject the file
    data = await upload.read(max_size + 1)
    return StagedFile(
        filename=upload.filename or "image",
        content_type=upload.content_type or "application/octet-stream",
        data=data,
    )


def _rejected(
    response: Response, notifier: NotificationCenter, reasons: List[str]
) -> ProductSubmissionResponse:
    response.status_code = status.HTTP_400_BAD_REQUEST
    return ProductSubmissionResponse(
        success=False,
        state=SubmissionState.IDLE.value,
        error="; ".join(reasons),
        notifications=[NotificationOut.from_notification(n) for n in notifier.notifications],
    )


@router.post(
    "/stores/{store_id}/products",
    response_model=ProductSubmissionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_product(
    store_id: str,
    response: Response,
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    quantity: Optional[str] = Form(None),
    inventory: Optional[str] = Form(None),
    images: Optional[List[UploadFile]] = File(None),
    uploader: Uploader = Depends(get_uploader),
    mutator: ProductMutator = Depends(get_mutator),
    notifier: NotificationCenter = Depends(get_notifier),
    request_id: str = Depends(get_request_id),
) -> ProductSubmissionResponse:
    """
    Submit the add-product form.

    Workflow:
    1. Stage the attached images (rejects the request if any file breaks the limits)
    2. Validate the fields
    3. Upload the images, if any
    4. Create the product
    5. Return the outcome with its notifications

    Returns:
        201 on success, 422 on field errors, 400 on rejected files or
        mutation errors, 502 when the upload service fails
    """
    logger.info(
        f"Add product: store={store_id}, images={len(images or [])}",
        extra={"request_id": request_id},
    )

    form = ProductFormState(
        values={
            "name": name,
            "description": description,
            "category": category,
            "price": price,
            "quantity": quantity,
            "inventory": inventory,
        }
    )

    channel = get_upload_channel(PRODUCT_IMAGE_CHANNEL)
    uploads = images or []
    if len(uploads) > channel.max_files:
        reason = f"Too many files: at most {channel.max_files} allowed"
        notifier.error(reason)
        return _rejected(response, notifier, [reason])

    files = [await _read_upload(upload, channel.max_file_size) for upload in uploads]
    rejections = stage_files(form, files, notifier, channel.name)
    if rejections:
        return _rejected(response, notifier, rejections)

    workflow = ProductSubmissionWorkflow(
        store_id=store_id, uploader=uploader, mutator=mutator, notifier=notifier
    )
    outcome = await workflow.submit(form)

    if outcome.state == SubmissionState.IDLE:
        response.status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    elif outcome.exception is not None:
        response.status_code = submission_error_status(outcome.exception)

    logger.info(
        f"Add product finished: store={store_id}, state={outcome.state.value}",
        extra={"request_id": request_id},
    )

    return ProductSubmissionResponse.from_outcome(outcome)
