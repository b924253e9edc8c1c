"""Wedding API routes."""

from typing import List

from fastapi import APIRouter, Depends, status

from wedding_api.application.services.wedding_service import create_wedding, list_my_weddings
from wedding_api.domain.repositories.wedding_repository import WeddingRepository
from wedding_api.domain.schemas.auth import Identity
from wedding_api.domain.schemas.wedding import WeddingCreate, WeddingRead
from wedding_api.interfaces.api.deps import get_current_identity
from wedding_api.interfaces.deps import get_wedding_repository

router = APIRouter(prefix="/weddings", tags=["Weddings"])


@router.get("/my", response_model=List[WeddingRead])
def my_weddings(
    repo: WeddingRepository = Depends(get_wedding_repository),
    identity: Identity = Depends(get_current_identity),
):
    return list_my_weddings(repo, identity)


@router.post("", response_model=WeddingRead, status_code=status.HTTP_201_CREATED)
def new_wedding(
    body: WeddingCreate,
    repo: WeddingRepository = Depends(get_wedding_repository),
    identity: Identity = Depends(get_current_identity),
):
    return create_wedding(repo, identity, body)
