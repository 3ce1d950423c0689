from fastapi import Depends, HTTPException, status
import logging

from museum_api.auth import security
from museum_api.auth.schemas_auth import TokenData

logger = logging.getLogger(__name__)

credentials_exception = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)

async def get_current_identity(
    token: str = Depends(security.oauth2_scheme),
) -> TokenData:
    token_data = security.decode_access_token(token)
    if token_data is None:
        logger.warning("Token validation error: invalid, expired or missing 'sub' claim.")
        raise credentials_exception
    return token_data

async def get_current_admin(
    identity: TokenData = Depends(get_current_identity),
) -> TokenData:
    if identity.role != security.ADMIN_ROLE:
        logger.warning(f"Identity '{identity.subject}' with role '{identity.role}' attempted admin action.")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Operation not permitted. Administrator privileges required."
        )
    return identity
