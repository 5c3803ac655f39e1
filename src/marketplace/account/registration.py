"""User registration — command and handler."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from marketplace.account.user import User, UserRole
from marketplace.domain import marketplace

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="User")
class RegisterUser:
    """Create an account for a shopper or vendor.

    Administrator accounts are created only when ``registered_by`` names an
    existing administrator.
    """

    name: String(required=True, max_length=50)
    email: String(required=True, max_length=254)
    role: String(max_length=10)
    registered_by: Identifier()


@marketplace.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)

        if command.role == UserRole.ADMIN.value:
            creator = repo.find(command.registered_by) if command.registered_by else None
            if creator is None or creator.role != UserRole.ADMIN.value:
                raise ValidationError({"role": ["Only an administrator can create administrator accounts"]})

        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["Email already registered"]})

        user = User.register(name=command.name, email=command.email, role=command.role)
        repo.add(user)

        logger.info(
            "User registered",
            user_id=str(user.id),
            role=user.role,
            registered_by=str(command.registered_by) if command.registered_by else None,
        )
        return str(user.id)
