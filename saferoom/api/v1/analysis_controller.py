# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.analysis_dto import (
    AnalyzeRoomRequest,
    AnalyzeRoomResponse,
    ErrorResponse,
)
from ...application.use_cases.analysis.analyze_room import AnalyzeRoomUseCase
from ...core.exceptions import InvalidInputError, UpstreamServiceError
from ...di.container import get_container

logger = logging.getLogger(__name__)

ANALYSIS_FAILED = "Analysis failed"

router = APIRouter(tags=["analysis"])


@router.post(
    "/analyze-room",
    response_model=AnalyzeRoomResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def analyze_room(request: AnalyzeRoomRequest):
    """
    Analyze a room snapshot for safety
    
    Args:
        request: Body with the base64-encoded image
        
    Returns:
        AnalyzeRoomResponse with scene description, people count, signals and
        the AI decision; 400 when imageBase64 is missing; 500 when an upstream
        API fails
    """
    container = get_container()
    analyze_room_use_case = container.get(AnalyzeRoomUseCase)
    
    try:
        return await analyze_room_use_case.execute(request.imageBase64)
    except InvalidInputError as exception:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(exception)},
        )
    except UpstreamServiceError as exception:
        logger.error(f"Error in /analyze-room: {exception.details}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": ANALYSIS_FAILED, "details": exception.details},
        )
