"""
Request export API routes.

Renders a request as a curl, wget, fetch or HTTPie snippet.
"""

from fastapi import APIRouter

from ..schemas.execute import ExecuteRequestInput, ExportResponse
from ..services.code_export import ExportFormat, export_request


router = APIRouter(prefix="/api/export", tags=["export"])


@router.post("", response_model=ExportResponse)
def export(request: ExecuteRequestInput, format: ExportFormat = "curl"):
    """
    Render a request in the requested format.

    Args:
        request: The request to render
        format: One of curl, wget, fetch, httpie (default curl)
    """
    return ExportResponse(format=format, snippet=export_request(request, format))
