from pydantic import BaseModel


class AccessToken(BaseModel):
    """Twitch bearer token plus the monotonic instant it stops being valid."""
    value: str
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return self.expires_at > now


class TwitchTokenResponse(BaseModel):
    access_token: str
    expires_in: float
    token_type: str = "bearer"
