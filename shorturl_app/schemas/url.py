from pydantic import BaseModel, Field, computed_field
from shorturl_app.config import settings


class URLCreate(BaseModel):
    url: str = Field(..., description="The URL to be shortened; https:// is added when no scheme is given")


class ShortLink(BaseModel):
    """A token together with the URL it redirects to.

    Used both for the confirmation page and the JSON API.
    """
    token: str
    long_url: str

    @computed_field
    @property
    def short_url(self) -> str:
        """Computed field - the full link shown to the user"""
        return f"{settings.base_url}/{self.token}"
