"""Resource Projection — serializes any resource row through its descriptor.

Invariants:
    - Output keys: id, every declared field (wire name), userId, User
    - Owner is embedded via UserPublic (no hash, no timestamps)
    - Resource timestamps are never included
"""

from scholarlog.core.resource_kinds import ResourceDescriptor
from scholarlog.schemas.user import project_user


def project_resource(descriptor: ResourceDescriptor, row) -> dict:
    """Build the public mapping for one stored resource."""
    projection: dict = {"id": row.id}
    for rule in descriptor.fields:
        projection[rule.name] = getattr(row, rule.attr)
    projection[descriptor.owner_field] = getattr(row, descriptor.owner_attr)
    projection["User"] = project_user(row.owner) if row.owner is not None else None
    return projection
