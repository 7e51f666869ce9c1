"""
Saved request API routes.

Provides CRUD operations for stored HTTP request configurations.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import ResourceNotFoundError
from ..models.request import Request
from ..schemas.request import RequestCreate, RequestUpdate, RequestResponse


router = APIRouter(prefix="/api/requests", tags=["requests"])


def _get_request_or_404(db: Session, request_id: int) -> Request:
    db_request = db.query(Request).filter(Request.id == request_id).first()
    if db_request is None:
        raise ResourceNotFoundError("Request", request_id)
    return db_request


@router.post("", response_model=RequestResponse, status_code=status.HTTP_201_CREATED)
def create_request(request_data: RequestCreate, db: Session = Depends(get_db)):
    """
    Save a new HTTP request configuration.

    Args:
        request_data: Request configuration data
        db: Database session

    Returns:
        The created request with assigned ID and timestamps
    """
    db_request = Request(**request_data.model_dump(mode="json"))
    db.add(db_request)
    db.commit()
    db.refresh(db_request)
    return db_request


@router.get("", response_model=list[RequestResponse])
def list_requests(db: Session = Depends(get_db)):
    """List all saved requests in display order."""
    return db.query(Request).order_by(Request.sort_order, Request.id).all()


@router.get("/{request_id}", response_model=RequestResponse)
def get_request(request_id: int, db: Session = Depends(get_db)):
    """
    Get a single request by ID.

    Raises:
        ResourceNotFoundError: 404 if request not found
    """
    return _get_request_or_404(db, request_id)


@router.put("/{request_id}", response_model=RequestResponse)
def update_request(
    request_id: int,
    request_data: RequestUpdate,
    db: Session = Depends(get_db)
):
    """
    Update an existing request. Only provided fields are changed.

    Raises:
        ResourceNotFoundError: 404 if request not found
    """
    db_request = _get_request_or_404(db, request_id)

    update_data = request_data.model_dump(mode="json", exclude_unset=True)
    for field, value in update_data.items():
        if value is None and field != "body_content":
            continue
        setattr(db_request, field, value)

    db.commit()
    db.refresh(db_request)
    return db_request


@router.delete("/{request_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_request(request_id: int, db: Session = Depends(get_db)):
    """
    Delete a request by ID. History entries keep their data with request_id cleared.

    Raises:
        ResourceNotFoundError: 404 if request not found
    """
    db.delete(_get_request_or_404(db, request_id))
    db.commit()
    return None
