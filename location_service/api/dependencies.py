from fastapi import Request

from location_service.models.location import LocationModel


def get_location_model(request: Request) -> LocationModel:
    return request.app.state.location_model
