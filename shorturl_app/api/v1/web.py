from pathlib import Path

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from shorturl_app.config import settings
from shorturl_app.dependencies import get_url_service
from shorturl_app.services.url_service import URLService, EmptyURLError

router = APIRouter(tags=["web"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Render the empty submission form"""
    return templates.TemplateResponse(
        request, "index.html", {"app_name": settings.app_name, "link": None}
    )


@router.post("/shorten", response_class=HTMLResponse)
async def shorten(
    request: Request,
    url: str = Form(""),
    url_service: URLService = Depends(get_url_service)
):
    """
    Shorten the submitted URL and render the confirmation page.
    
    A missing or empty `url` field is a 400, never a validation 422.
    """
    try:
        link = url_service.create_short_url(url)
    except EmptyURLError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    
    return templates.TemplateResponse(
        request, "index.html", {"app_name": settings.app_name, "link": link}
    )


@router.get("/{token}")
async def redirect_to_long_url(
    token: str,
    url_service: URLService = Depends(get_url_service)
):
    """
    Redirect to the original URL.
    
    Only non-empty single-segment paths reach this handler; "/" is
    served by index() alone.
    """
    long_url = url_service.get_long_url(token)
    
    if long_url is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Short URL not found"
        )
    
    return RedirectResponse(url=long_url, status_code=status.HTTP_301_MOVED_PERMANENTLY)
