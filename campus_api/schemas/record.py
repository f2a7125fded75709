"""Record Schema — immutable school record and its JSON wire contract.

Invariants:
    - Record is frozen: an installed record never changes under a reader
    - Wire keys: guid, school, mascot, nickname, location, latlong, ncaa, conference
    - ncaa/conference omitted from the encoded form when empty
    - Unknown wire keys ignored; missing keys and nulls decode as empty strings
    - Wire keys match case-insensitively ("GUID" fills id); an exact-case key wins

Design Decisions:
    - One model for domain value and wire contract: the service is read-only and
      the JSON shape is the only representation (ADR: no mapping layer to maintain)
    - Aliases carry the wire names so Python code reads in domain terms
"""

from pydantic import (
    BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator,
)

OPTIONAL_WIRE_FIELDS = ("ncaa", "conference")
WIRE_KEYS = frozenset({
    "guid", "school", "mascot", "nickname", "location", "latlong", "ncaa", "conference",
})


class Record(BaseModel):
    """One university/school entry."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, extra="ignore",
    )

    id: str = Field("", alias="guid")
    name: str = Field("", alias="school")
    short_name: str = Field("", alias="mascot")
    alias: str = Field("", alias="nickname")
    location: str = ""
    coordinates: str = Field("", alias="latlong")
    category: str = Field("", alias="ncaa")
    group: str = Field("", alias="conference")

    @model_validator(mode="before")
    @classmethod
    def fold_wire_keys(cls, data: object) -> object:
        """Map differently-cased wire keys onto their canonical names."""
        if not isinstance(data, dict):
            return data
        folded = {}
        for key, value in data.items():
            canonical = key.lower() if isinstance(key, str) else key
            if canonical in WIRE_KEYS and canonical != key:
                if canonical not in data:
                    folded[canonical] = value
            else:
                folded[key] = value
        return folded

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, v: object) -> object:
        """JSON null decodes like a missing key."""
        return "" if v is None else v

    def to_wire(self) -> dict[str, str]:
        """Encode with wire keys, dropping empty optional fields."""
        data = self.model_dump(by_alias=True)
        for key in OPTIONAL_WIRE_FIELDS:
            if not data[key]:
                del data[key]
        return data


RecordList = TypeAdapter(list[Record])
