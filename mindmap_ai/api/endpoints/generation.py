import logging
from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile
from fastapi.responses import JSONResponse

from mindmap_ai.core.config import settings
from mindmap_ai.schemas.common import ErrorResponse
from mindmap_ai.schemas.mindmap import ChartType, MindMapRequest, MindMapResponse
from mindmap_ai.schemas.node_details import NodeDetailsRequest, NodeDetailsResponse
from mindmap_ai.services import ai_client, file_service, mock_generator
from mindmap_ai.services.fallback import with_fallback

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Generation"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    413: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _error(status_code: int, message: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 1. MIND MAP FROM PROMPT
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.post(
    "/generate-mindmap",
    response_model=MindMapResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Generate a mind map from a text prompt",
)
async def generate_mindmap(request: Optional[MindMapRequest] = None):
    request = request or MindMapRequest()
    prompt = (request.prompt or "").strip()
    if not prompt:
        return _error(400, "Prompt is required")

    try:
        logger.info(f"[MINDMAP] Request: {prompt[:80]!r} ({request.chart_type.value})")
        return await with_fallback(
            lambda: ai_client.generate_mind_map(prompt, request.chart_type),
            lambda: mock_generator.mock_mind_map(prompt, request.chart_type),
            label="MINDMAP",
        )
    except Exception as e:
        logger.error(f"Mind map generation failed: {e}", exc_info=True)
        return _error(500, "Failed to generate mindmap", str(e))


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 2. MIND MAP FROM FILE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.post(
    "/generate-mindmap-file",
    response_model=MindMapResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Generate a mind map from an uploaded text document",
)
async def generate_mindmap_file(
    file: Optional[UploadFile] = File(None),
    chart_type: Optional[str] = Form(None, alias="chartType"),
):
    """
    The upload is written to a temporary file, read back as plain text and
    removed again on every exit path, including failures.
    """
    if file is None:
        return _error(400, "File is required")

    try:
        chart = ChartType(chart_type) if chart_type else ChartType.hierarchical
    except ValueError:
        return _error(400, "Invalid chartType", f"Unknown chart type: {chart_type!r}")

    content = await file.read()
    max_bytes = settings.MAX_FILE_SIZE_MB * 1024 * 1024
    if len(content) > max_bytes:
        return _error(413, f"File too large. Maximum size is {settings.MAX_FILE_SIZE_MB}MB.")

    file_name = file.filename or "document.txt"
    try:
        path = await file_service.save_upload(content, file_name)
        try:
            text = await file_service.read_text(path)
            mind_map = await with_fallback(
                lambda: ai_client.generate_file_mind_map(text, file_name, chart),
                lambda: mock_generator.mock_file_mind_map(file_name, chart),
                label="MINDMAP-FILE",
            )
        finally:
            file_service.remove_upload(path)
        return mind_map
    except Exception as e:
        logger.error(f"Mind map generation from {file_name!r} failed: {e}", exc_info=True)
        return _error(500, "Failed to generate mindmap from file", str(e))


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 3. NODE DETAILS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.post(
    "/node-details",
    response_model=NodeDetailsResponse,
    responses=ERROR_RESPONSES,
    summary="Expand a single node into detailed learning content",
)
async def node_details(request: Optional[NodeDetailsRequest] = None):
    request = request or NodeDetailsRequest()
    node_text = (request.node_text or "").strip()
    if not node_text:
        return _error(400, "Node text is required")

    try:
        return await with_fallback(
            lambda: ai_client.generate_node_details(
                node_text, request.parent_context, request.document_context
            ),
            lambda: mock_generator.mock_node_details(node_text),
            label="DETAILS",
        )
    except Exception as e:
        logger.error(f"Node details generation failed: {e}", exc_info=True)
        return _error(500, "Failed to generate node details", str(e))
