"""Password tools endpoints.

Public endpoint for password strength checking.
"""

from fastapi import APIRouter

from api.models import PasswordCheckRequest, PasswordCheckResponse
from password_checker import analyze_password, rate_total


router = APIRouter(tags=["Password Tools"])


@router.post("/check", response_model=PasswordCheckResponse)
async def check_password(request: PasswordCheckRequest):
    """Score a password and return the breakdown with suggestions."""
    result = analyze_password(request.password, source="api")

    return PasswordCheckResponse(
        **result.to_dict(),
        strength=rate_total(result.total),
    )
