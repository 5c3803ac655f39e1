"""Request-scoped dependencies: the acting identity and role guards."""

from fastapi import Depends, Header, HTTPException
from protean.utils.globals import current_domain

from marketplace.account.user import User
from marketplace.exceptions import AuthorizationError
from marketplace.shared.access import Actor
from marketplace.utils.logging import bind_request_context


async def current_actor(x_user_id: str | None = Header(default=None)) -> Actor:
    """Resolve the gateway-supplied ``X-User-Id`` header to an ``Actor``."""
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Not authorized to access this route")

    user = current_domain.repository_for(User).find(x_user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="Not authorized to access this route")

    bind_request_context(actor_id=str(user.id), actor_role=user.role)
    return Actor(id=str(user.id), role=user.role)


def require_roles(*roles: str):
    """Route guard admitting only actors holding one of ``roles``."""

    async def guard(actor: Actor = Depends(current_actor)) -> Actor:
        if actor.role not in roles:
            raise AuthorizationError(f"User role {actor.role} is not authorized to access this route")
        return actor

    return guard
