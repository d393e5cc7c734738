import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.errors import PyMongoError

from location_service.api.dependencies import get_location_model
from location_service.models.location import LocationModel

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(
    location_model: Annotated[LocationModel, Depends(get_location_model)],
) -> dict[str, str]:
    try:
        await location_model.ping()
    except PyMongoError as e:
        logger.warning("Health check failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unavailable",
        ) from e
    return {"status": "ok"}
