from typing import Annotated

from fastapi import HTTPException, status
from fastapi.params import Security
from fastapi.security import APIKeyHeader

from fields_api.config import settings


api_key_header_scheme = APIKeyHeader(name="x-api-key", auto_error=False)


def get_api_key(api_key_header: Annotated[str | None, Security(api_key_header_scheme)]) -> str | None:
    """Validate the API key sent in the x-api-key header.

    Routes stay open when no API key is configured.

    Args:
        api_key_header: The API key passed in the x-api-key header.

    Returns:
        The validated API key, or None when no key is configured.

    Raises:
        HTTPException: If the API key is invalid or missing.
    """
    key = settings.api_key
    if not key:
        return None
    if api_key_header == key:
        return api_key_header
    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or missing API Key")
