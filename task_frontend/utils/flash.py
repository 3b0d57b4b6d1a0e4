from typing import Mapping, Optional
from urllib.parse import urlencode

from fastapi import status
from fastapi.responses import RedirectResponse

FLASH_TEXT_PARAM = "flashMessageText"
FLASH_TYPE_PARAM = "flashMessageType"
FLASH_PARAMS = (FLASH_TEXT_PARAM, FLASH_TYPE_PARAM)


def redirect_with_flash(url: str, message: str, kind: str = "success") -> RedirectResponse:
    """Redirect to url with the flash message carried in the query string.

    Templates read flashMessageText and flashMessageType to render a
    notification banner.
    """
    params = urlencode({FLASH_TEXT_PARAM: message, FLASH_TYPE_PARAM: kind})
    separator = "&" if "?" in url else "?"
    return RedirectResponse(f"{url}{separator}{params}", status_code=status.HTTP_303_SEE_OTHER)


def read_flash(query: Mapping[str, str]) -> dict:
    """Template context for a flash message passed on the query string."""
    text: Optional[str] = query.get(FLASH_TEXT_PARAM)
    if not text:
        return {"flash_message_text": None, "flash_message_type": None}
    return {
        "flash_message_text": text,
        "flash_message_type": query.get(FLASH_TYPE_PARAM) or "success",
    }
