from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UserBrief(CamelModel):
    id: int
    full_name: str
    profile_pic: str = ""


class MessageOut(BaseModel):
    message: str


class PaginationOut(CamelModel):
    total_items: int
    total_pages: int
    current_page: int


class Timestamped(CamelModel):
    created_at: datetime
