"""
History service for saving request execution records.

Saving is best-effort: a failed write is logged and rolled back, and
never reaches the caller of the execution.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..logging_config import get_logger
from ..models.history import History
from ..schemas.execute import ExecuteRequestInput, ExecutionResult


logger = get_logger(__name__)


def build_history(
    request: ExecuteRequestInput,
    result: ExecutionResult,
    request_id: int | None = None
) -> History:
    """
    Build a history record for an execution without saving it.

    The status is recorded only when a response was received.
    """
    return History(
        request_id=request_id,
        method=request.method.value,
        url=request.url,
        request_snapshot=request.model_dump_json(),
        response_status=result.status if result.status > 0 else None,
        response_headers=[kv.model_dump() for kv in result.headers],
        response_body=result.body,
        response_size=result.size_bytes,
        duration_ms=int(result.timing.total_ms),
        error=result.error,
    )


def save_history(
    db: Session,
    request: ExecuteRequestInput,
    result: ExecutionResult,
    request_id: int | None = None
) -> History | None:
    """
    Save a request execution to history.

    Args:
        db: Database session
        request: The executed request
        result: The execution result, successful or not
        request_id: Optional ID of the saved request (if executing a saved request)

    Returns:
        The created history record, or None if it could not be saved
    """
    history = build_history(request, result, request_id)
    try:
        db.add(history)
        db.commit()
        db.refresh(history)
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Failed to save history entry for %s %s: %s", history.method, history.url, e)
        return None
    return history
