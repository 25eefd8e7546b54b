from fastapi import APIRouter, Depends, HTTPException, status
from shorturl_app.schemas.url import URLCreate, ShortLink
from shorturl_app.services.url_service import URLService, EmptyURLError
from shorturl_app.dependencies import get_url_service

router = APIRouter(prefix="/urls", tags=["urls"])


@router.post("/", response_model=ShortLink, status_code=status.HTTP_201_CREATED)
async def create_short_url(
    url_data: URLCreate,
    url_service: URLService = Depends(get_url_service)
):
    """Create a new short URL"""
    try:
        return url_service.create_short_url(url_data.url)
    except EmptyURLError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{token}", response_model=ShortLink)
async def get_url_info(
    token: str,
    url_service: URLService = Depends(get_url_service)
):
    """Get the URL behind a token without redirecting"""
    link = url_service.get_link(token)
    if not link:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Short URL not found"
        )
    return link
