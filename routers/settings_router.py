import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from crud.pagination import resolve_page_request, total_pages
from crud.settings import (
    count_settings,
    create_setting,
    delete_setting,
    get_setting,
    list_settings,
    update_setting,
)
from db.database import get_db
from schemas.settings import PaginationInfo, SettingListResponse, SettingResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])

NOT_FOUND = "Setting not found"


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


async def json_body(request: Request) -> Any:
    """Parse the raw request body as an arbitrary JSON value.

    The payload is opaque to the store, so no schema is applied. An empty
    body is treated as an empty object. NaN and Infinity are rejected.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        raise HTTPException(status_code=400, detail="Request body must be valid JSON")


def _store_failure(db: Session, message: str) -> HTTPException:
    logger.exception(message)
    db.rollback()
    return HTTPException(status_code=500, detail=message)


@router.post("", response_model=SettingResponse, status_code=status.HTTP_201_CREATED)
def create(data: Any = Depends(json_body), db: Session = Depends(get_db)):
    try:
        setting = create_setting(db, data)
    except SQLAlchemyError:
        raise _store_failure(db, "Failed to create setting")
    logger.info("Created setting %s", setting.uid)
    return setting


@router.get("", response_model=SettingListResponse)
def read_all(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    db: Session = Depends(get_db),
):
    page_request = resolve_page_request(page, limit)
    try:
        total_count = count_settings(db)
        items = list_settings(db, offset=page_request.offset, limit=page_request.limit)
    except SQLAlchemyError:
        raise _store_failure(db, "Failed to fetch settings")
    return SettingListResponse(
        data=[SettingResponse.model_validate(item) for item in items],
        pagination=PaginationInfo(
            page=page_request.page,
            limit=page_request.limit,
            total_count=total_count,
            total_pages=total_pages(total_count, page_request.limit),
        ),
    )


@router.get("/{uid}", response_model=SettingResponse)
def read_one(uid: str, db: Session = Depends(get_db)):
    try:
        setting = get_setting(db, uid)
    except SQLAlchemyError:
        raise _store_failure(db, "Failed to fetch setting")
    if setting is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return setting


@router.put("/{uid}", response_model=SettingResponse)
def update(uid: str, data: Any = Depends(json_body), db: Session = Depends(get_db)):
    try:
        setting = update_setting(db, uid, data)
    except SQLAlchemyError:
        raise _store_failure(db, "Failed to update setting")
    if setting is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    logger.info("Updated setting %s", uid)
    return setting


@router.delete("/{uid}", status_code=status.HTTP_204_NO_CONTENT)
def delete(uid: str, db: Session = Depends(get_db)):
    # Deleting an unknown uid is not an error
    try:
        deleted = delete_setting(db, uid)
    except SQLAlchemyError:
        raise _store_failure(db, "Failed to delete setting")
    if deleted:
        logger.info("Deleted setting %s", uid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
