"""User Schemas — public projection of a User (owner summary and profile).

Invariants:
    - UserPublic has no password field: the hash cannot leak through it
    - created_at/updated_at are not part of the projection
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UserPublic(BaseModel):
    """Owner summary embedded in every resource projection."""
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True,
    )

    id: int
    designation: str | None = None
    first_name: str
    last_name: str
    email_address: str
    affiliation: str | None = None
    areas_of_interest: str | None = None
    homepage: str | None = None


def project_user(user) -> dict:
    """Serialize a User ORM row to its public camelCase mapping."""
    return UserPublic.model_validate(user).model_dump(by_alias=True)
