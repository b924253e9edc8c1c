"""Wedding service — owner-scoped wedding records."""

from typing import List

from wedding_api.domain.models.wedding import Wedding
from wedding_api.domain.repositories.wedding_repository import WeddingRepository
from wedding_api.domain.schemas.auth import Identity
from wedding_api.domain.schemas.wedding import WeddingCreate


def list_my_weddings(repo: WeddingRepository, identity: Identity) -> List[Wedding]:
    return repo.list_for_owner(identity.user_id)


def create_wedding(repo: WeddingRepository, identity: Identity, data: WeddingCreate) -> Wedding:
    return repo.create({**data.model_dump(), "owner_id": identity.user_id, "status": "planning"})
