import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, status

from location_service.api.dependencies import get_location_model
from location_service.models.location import LocationModel
from location_service.schemas.location import Location, LocationRequest, StatusMessage
from location_service.utils.object_id import parse_object_id

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=Location,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_location(
    location: Annotated[LocationRequest, Body(...)],
    location_model: Annotated[LocationModel, Depends(get_location_model)],
) -> Location:
    created = await location_model.insert(location)
    logger.info("Created location %s", created.id)
    return created


@router.get("", response_model=list[Location], response_model_exclude_none=True)
async def get_locations(
    location_model: Annotated[LocationModel, Depends(get_location_model)],
) -> list[Location]:
    return await location_model.find_all()


@router.put("/{location_id}", response_model=StatusMessage)
async def update_location(
    location_id: str,
    location: Annotated[LocationRequest, Body(...)],
    location_model: Annotated[LocationModel, Depends(get_location_model)],
) -> StatusMessage:
    object_id = parse_object_id(location_id)

    matched = await location_model.replace_fields(object_id, location)
    if matched == 0:
        logger.info("Update skipped, location %s not found", location_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")

    logger.info("Updated location %s", location_id)
    return StatusMessage(
        status="success",
        message=f"Location with ID {location_id} was successfully updated",
    )


@router.delete("/{location_id}", response_model=StatusMessage)
async def delete_location(
    location_id: str,
    location_model: Annotated[LocationModel, Depends(get_location_model)],
) -> StatusMessage:
    object_id = parse_object_id(location_id)

    deleted = await location_model.delete_by_id(object_id)
    if deleted == 0:
        logger.info("Delete skipped, location %s not found", location_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")

    logger.info("Deleted location %s", location_id)
    return StatusMessage(
        status="success",
        message=f"Location with ID {location_id} was successfully deleted",
    )
