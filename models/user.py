from pydantic import BaseModel, Field
from typing import Literal

# Free plan allowance, both for signed-in users and anonymous visitors
FREE_TRANSLATIONS_LIMIT = 10


class UserUsage(BaseModel):
    """Usage counters owned by the user-session component, passed in explicitly"""

    # free, basic, premium
    plan: Literal["free", "basic", "premium"] = "free"

    translations_used: int = Field(default=0, ge=0)
    translations_limit: int = Field(default=FREE_TRANSLATIONS_LIMIT, ge=0)

    email_verified: bool = False

    def __repr__(self):
        return f'<UserUsage {self.plan} {self.translations_used}/{self.translations_limit}>'
