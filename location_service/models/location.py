import logging
from datetime import datetime, timezone

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection  # noqa: TCH002
from pymongo.errors import PyMongoError

from location_service.schemas.location import Location, LocationRequest

logger = logging.getLogger(__name__)


def _now() -> datetime:
    # BSON dates carry millisecond precision
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class LocationModel:
    """Store adapter for the locations collection.

    One instance is built at startup and shared by every request; the motor
    collection handle is safe for concurrent use.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create_indexes(self) -> None:
        try:
            await self.collection.create_index([("location", "2dsphere")])
        except PyMongoError as e:
            logger.warning("Index creation might have failed (or already exists): %s", e)
        else:
            logger.info("2dsphere index on 'location' field verified")

    async def insert(self, location: LocationRequest) -> Location:
        location_data = location.model_dump()
        location_data["_id"] = ObjectId()
        location_data["created_at"] = _now()

        await self.collection.insert_one(location_data)

        return Location(**location_data)

    async def find_all(self) -> list[Location]:
        locations = await self.collection.find({}).to_list(length=None)
        return [Location(**location) for location in locations]

    async def replace_fields(self, location_id: ObjectId, location: LocationRequest) -> int:
        """Overwrite name, description and location; returns the matched count."""
        result = await self.collection.update_one(
            {"_id": location_id},
            {
                "$set": {
                    "name": location.name,
                    "description": location.description,
                    "location": location.location.model_dump(),
                }
            },
        )
        return result.matched_count

    async def delete_by_id(self, location_id: ObjectId) -> int:
        result = await self.collection.delete_one({"_id": location_id})
        return result.deleted_count

    async def ping(self) -> None:
        await self.collection.database.command("ping")
