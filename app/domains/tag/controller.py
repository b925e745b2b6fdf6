"""Tag API controller."""

from fastapi import APIRouter, Depends, Path

from app.core.dependencies import get_tag_service
from app.domains.tag.service import TagService
from app.exceptions.tag import TagNotFoundError
from app.schemas.tag import TagResponse

router = APIRouter(
    prefix="/api/tags",
    tags=["tags"],
)


@router.get("", response_model=list[TagResponse])
async def get_tags(service: TagService = Depends(get_tag_service)):
    """Get every tag, including tags no todo uses any more."""
    return await service.list_tags()


@router.get("/{name}", response_model=TagResponse)
async def get_tag(
    name: str = Path(..., description="Exact tag name"),
    service: TagService = Depends(get_tag_service),
):
    """Get a tag by its exact name."""
    tag = await service.get_tag_by_name(name)
    if not tag:
        raise TagNotFoundError("Tag not found")
    return tag
