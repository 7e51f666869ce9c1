"""
History record API routes.

Provides endpoints for viewing and managing request execution history.
History records are created by the execute endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import ResourceNotFoundError
from ..models.history import History
from ..schemas.history import HistoryResponse, HistoryListResponse


router = APIRouter(prefix="/api/history", tags=["history"])


@router.get("", response_model=HistoryListResponse)
def list_history(
    skip: int = 0,
    limit: int = 50,
    request_id: int | None = None,
    db: Session = Depends(get_db)
):
    """
    Get history records, newest first.

    Args:
        skip: Number of records to skip (for pagination)
        limit: Maximum number of records to return
        request_id: Only return executions of this saved request
        db: Database session
    """
    query = db.query(History)
    if request_id is not None:
        query = query.filter(History.request_id == request_id)

    total = query.count()
    items = (
        query
        .order_by(History.executed_at.desc(), History.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )
    return HistoryListResponse(items=items, total=total)


def _get_history_or_404(db: Session, history_id: int) -> History:
    db_history = db.query(History).filter(History.id == history_id).first()
    if db_history is None:
        raise ResourceNotFoundError("History record", history_id)
    return db_history


@router.get("/{history_id}", response_model=HistoryResponse)
def get_history(history_id: int, db: Session = Depends(get_db)):
    """Get a single history record by ID."""
    return _get_history_or_404(db, history_id)


@router.delete("/{history_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_history(history_id: int, db: Session = Depends(get_db)):
    """Delete a single history record by ID."""
    db.delete(_get_history_or_404(db, history_id))
    db.commit()
    return None


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def clear_history(db: Session = Depends(get_db)):
    """Delete all history records."""
    db.query(History).delete()
    db.commit()
    return None
