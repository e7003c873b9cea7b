from typing import Any

from pydantic import BaseModel, model_validator

from fleet_admin.schemas.common import as_mapping, generate_id, safe_string

ALT_PLACEHOLDER = "Vozilo"

_TEXT_FIELDS = (
    "tag", "title", "text", "price", "image",
    "fuel", "transmission", "consumption", "passengers",
)


class VehicleRecord(BaseModel):
    """One entry of a fleet language list. Every field is a trimmed string."""
    id:           str
    tag:          str = ""
    title:        str = ""
    text:         str = ""
    price:        str = ""
    image:        str = ""
    alt:          str = ""
    fuel:         str = ""
    transmission: str = ""
    consumption:  str = ""
    passengers:   str = ""

    model_config = {"extra": "ignore"}

    @model_validator(mode="before")
    @classmethod
    def coerce(cls, data: Any) -> dict:
        raw = as_mapping(data)
        out = {name: safe_string(raw.get(name)) for name in _TEXT_FIELDS}
        out["id"] = safe_string(raw.get("id"))
        out["alt"] = safe_string(raw.get("alt")) or out["title"] or ALT_PLACEHOLDER
        return out


def normalize_vehicle(raw: Any, index: int) -> VehicleRecord:
    record = VehicleRecord.model_validate(raw)
    if not record.id:
        record.id = generate_id("custom", index)
    return record
