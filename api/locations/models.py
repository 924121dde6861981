# api/locations/models.py
from pydantic import BaseModel, ConfigDict


class LocationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    code: str
    name: str
    building: str = ""
    floor: str | None = None
    room: str | None = None


class LocationPage(BaseModel):
    data: list[LocationRead]
    total: int
    page: int
    page_size: int
