"""
Authentication Use Case DTOs (Data Transfer Objects)
"""

from src.app.use_cases.dtos import CamelModel, UserResponse


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(CamelModel):
    """Response for user login use case"""

    access_token: str
    user: UserResponse
