from dataclasses import dataclass, field

from app.models import User


@dataclass
class RequestContext:
    """
    Identity of the caller, resolved once per request.

    Built by the identity-resolution dependency and handed explicitly to every
    handler and service that needs to know who is acting.
    """

    user: User
    claims: dict = field(default_factory=dict)

    @property
    def user_id(self) -> int:
        return self.user.id

    @property
    def role(self) -> str:
        return self.user.role
