"""
Request execution API routes.

Provides endpoints for executing HTTP requests, both saved and ad-hoc.
Execution failures are part of the result, so these endpoints answer
200 with the ExecutionResult whenever the input itself is valid. Every
execution is recorded in history, including failed ones.
"""

from fastapi import APIRouter, Depends
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from ..config import get_settings
from ..database import get_db
from ..exceptions import BadRequestError, ResourceNotFoundError
from ..models.request import Request
from ..schemas.execute import ExecuteRequestInput, ExecutionResult, RequestSettings
from ..services.http_executor import execute
from ..services.history_service import save_history


router = APIRouter(prefix="/api/execute", tags=["execute"])


def default_request_settings() -> RequestSettings:
    """Transport policy used for saved requests executed without explicit settings."""
    settings = get_settings()
    return RequestSettings(
        timeout_ms=settings.default_timeout_ms,
        follow_redirects=settings.default_follow_redirects,
        max_redirects=settings.default_max_redirects,
    )


def to_execute_input(db_request: Request, settings: RequestSettings) -> ExecuteRequestInput:
    """
    Build an execution input from a saved request.

    Raises:
        BadRequestError: If the stored request is not valid (e.g. unknown method)
    """
    try:
        return ExecuteRequestInput.model_validate({
            "method": db_request.method,
            "url": db_request.url,
            "headers": db_request.headers or [],
            "query_params": db_request.query_params or [],
            "body_type": db_request.body_type or "none",
            "body_content": db_request.body_content,
            "auth_type": db_request.auth_type or "none",
            "auth_config": db_request.auth_config or {"type": "none"},
            "settings": settings,
        })
    except PydanticValidationError as e:
        raise BadRequestError(f"Saved request {db_request.id} is invalid: {e}") from e


@router.post("", response_model=ExecutionResult)
async def execute_adhoc_request(
    request: ExecuteRequestInput,
    db: Session = Depends(get_db)
):
    """
    Execute an unsaved HTTP request.

    Args:
        request: The resolved request to execute
        db: Database session

    Returns:
        ExecutionResult with status, headers, body, timing and any error
    """
    result = await execute(request)
    save_history(db=db, request=request, result=result, request_id=None)
    return result


@router.post("/{request_id}", response_model=ExecutionResult)
async def execute_saved_request(
    request_id: int,
    settings: RequestSettings | None = None,
    db: Session = Depends(get_db)
):
    """
    Execute a saved HTTP request by ID.

    Args:
        request_id: The unique identifier of the saved request
        settings: Optional transport policy; configured defaults apply otherwise
        db: Database session

    Returns:
        ExecutionResult with status, headers, body, timing and any error

    Raises:
        ResourceNotFoundError: 404 if request not found
    """
    db_request = db.query(Request).filter(Request.id == request_id).first()
    if db_request is None:
        raise ResourceNotFoundError("Request", request_id)

    execute_input = to_execute_input(db_request, settings or default_request_settings())
    result = await execute(execute_input)
    save_history(db=db, request=execute_input, result=result, request_id=request_id)
    return result
