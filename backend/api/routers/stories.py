"""Story API endpoints.

Routes:
- POST /stories - Generate a structured story from topic/style/length

Mirrors the Lambda handler's contract so the endpoint can be exercised
locally: 200 with {success: true, data} or 500 with {success: false, error}.

Dependencies: backend.application.services.story_service
System role: Story generation HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from backend.api.deps import get_story_service
from backend.application.services.story_service import StoryService
from backend.core.story_generation.lambda_utils.event_parser import decode_json_body
from backend.core.story_generation.lambda_utils.responses import UNKNOWN_ERROR_MESSAGE
from backend.models.common import ErrorResponse
from backend.models.story import StoryRequest, StoryResponse
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stories", tags=["stories"])


@router.post(
    "",
    response_model=StoryResponse,
    responses={500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": False,
            "content": {"application/json": {"schema": StoryRequest.model_json_schema()}},
        }
    },
)
async def create_story(
    request: Request,
    story_service: StoryService = Depends(get_story_service),
) -> StoryResponse | JSONResponse:
    """Generate a story.

    The body is read raw rather than bound to a model so that a missing or
    non-object body falls back to defaults instead of failing with 422.

    Args:
        request: Incoming request
        story_service: Injected StoryService

    Returns:
        StoryResponse on success, JSONResponse(500) with ErrorResponse otherwise
    """
    try:
        body = decode_json_body(await request.body())
        story_input = story_service.build_input(body)
        story = await story_service.agenerate(story_input)
        return StoryResponse(data=story)

    except Exception as e:
        log_exception_with_context(logger, "create_story - Error generating story", e)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=str(e) or UNKNOWN_ERROR_MESSAGE).model_dump(),
        )
