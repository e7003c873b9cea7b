from typing import Any

from pydantic import BaseModel, model_validator

from fleet_admin.schemas.common import as_mapping, generate_id, safe_string


class GalleryItem(BaseModel):
    """A before/after photo pair shown in the gallery."""
    id:     str
    title:  str = ""
    before: str = ""
    after:  str = ""

    model_config = {"extra": "ignore"}

    @model_validator(mode="before")
    @classmethod
    def coerce(cls, data: Any) -> dict:
        raw = as_mapping(data)
        return {name: safe_string(raw.get(name)) for name in ("id", "title", "before", "after")}


def normalize_gallery_item(raw: Any, index: int) -> GalleryItem:
    item = GalleryItem.model_validate(raw)
    if not item.id:
        item.id = generate_id("gallery", index)
    return item
