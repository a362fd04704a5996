from fastapi import APIRouter, HTTPException, Request
import logging
from .schemas import HelloResponse, ErrorResponse
from .services import (
    INVALID_INPUT,
    get_hello_message,
    is_first_half_alphabet,
    trim_name,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Hello World"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid Input"},
        405: {"model": ErrorResponse, "description": "Method not allowed"},
    },
)

@router.get("/hello-world", response_model=HelloResponse)
async def hello_world(request: Request):
    """
    Greet the caller when the name starts with a letter between A and M
    """
    logger.info("Received GET /hello-world request")

    # First value wins when the parameter is repeated
    values = request.query_params.getlist("name")
    name = trim_name(values[0]) if values else ""

    if not name or not is_first_half_alphabet(name):
        logger.warning(f"Rejected name: {name!r}")
        raise HTTPException(status_code=400, detail=INVALID_INPUT)

    return get_hello_message(name)
