from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

owner_header = APIKeyHeader(name="X-User-Id", auto_error=False)


async def require_owner(owner_id: str | None = Security(owner_header)) -> str:
    if not owner_id or not owner_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing X-User-Id header"
        )
    return owner_id.strip()
