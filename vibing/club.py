"""Club information served by the backend."""

from collections.abc import Mapping
from dataclasses import dataclass

from vibing.errors import FetchError
from vibing.fetching import fetch_backend

_FIELD_KEYS = (
    ("created_by", "createdBy"),
    ("modified_by", "modifiedBy"),
    ("deleted", "deleted"),
    ("id", "id"),
    ("club_name", "clubName"),
    ("vat_code", "vatCode"),
    ("address", "address"),
    ("category", "category"),
    ("opening_time", "openingTime"),
    ("closing_time", "closingTime"),
    ("phone_number", "phoneNumber"),
)


@dataclass(frozen=True)
class ClubResponse:
    """A club as returned by the backend."""

    created_by: str
    modified_by: str
    deleted: bool
    id: int
    club_name: str
    vat_code: str
    address: str
    category: str
    opening_time: str
    closing_time: str
    phone_number: str
    image: str | None = None

    @classmethod
    def from_dict(cls, data):
        """Build a club from its camel-case JSON document."""
        if not isinstance(data, Mapping):
            raise ValueError("expected an object for ClubResponse")
        values = {}
        for name, key in _FIELD_KEYS:
            if key not in data:
                raise ValueError(f"missing field `{key}` for ClubResponse")
            values[name] = data[key]
        if not isinstance(values["id"], int) or not 0 <= values["id"] < 2**32:
            raise ValueError("field `id` must be an unsigned 32-bit integer")
        return cls(image=data.get("image"), **values)


def get_club_info(club_id, verbose=False):
    """Fetch, print and return the club with ``club_id``."""
    document = fetch_backend(f"/api/v1/club/{club_id}", "GET", None, verbose)
    try:
        club = ClubResponse.from_dict(document)
    except ValueError as err:
        raise FetchError("Could not decode the club", cause=err) from err
    print(club)
    return club