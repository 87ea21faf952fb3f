"""
Service: CRUD operations on users.

Input: CreateUserCommand / UpdateUserCommand / user ids
Output: User entities, None for unknown ids, bool for deletes
Side effects: Mutates the user repository.
Failure cases: ValidationError on invalid create/update input.
"""

import logging

from app.application.users.dtos import CreateUserCommand, UpdateUserCommand
from app.domain.errors import LEGACY_VALIDATION_MARKER, ValidationError
from app.domain.users.entities import NewUser, User, UserChanges
from app.domain.users.ports import UserRepository
from app.domain.users.validation import UserValidator, ValidationResult

module_logger = logging.getLogger(__name__)


def _validation_error(result: ValidationResult) -> ValidationError:
    return ValidationError(f"{LEGACY_VALIDATION_MARKER}: {', '.join(result.errors)}")


def _clean(value: object) -> str | None:
    return value.strip() if isinstance(value, str) else None


class UserService:
    """Orchestrates user management.

    Lookups report absence with None/False and leave the choice of
    raising NotFoundError to the caller. Invalid input raises
    ValidationError and never reaches the repository.
    """

    def __init__(
        self,
        repository: UserRepository,
        validator: UserValidator | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            repository: Storage for users.
            validator: Input rules. A default UserValidator is used if omitted.
            logger: Logger for operational messages.
        """
        self._repository = repository
        self._validator = validator or UserValidator()
        self._logger = logger or module_logger

    def get_user_by_id(self, user_id: int) -> User | None:
        """Return a user by id, or None if it does not exist."""
        self._logger.info("Fetching user by ID", extra={"meta": {"userId": user_id}})

        user = self._repository.find_by_id(user_id)
        if user is None:
            self._logger.warning("User not found", extra={"meta": {"userId": user_id}})
        return user

    def get_all_users(self) -> list[User]:
        self._logger.info("Fetching all users")
        return self._repository.find_all()

    def create_user(self, command: CreateUserCommand) -> User:
        """Validate and store a new user.

        Args:
            command: Raw name and email.

        Returns:
            The created user with its assigned id and creation time.

        Raises:
            ValidationError: If any rule is broken. Nothing is stored.
        """
        self._logger.info("Creating new user", extra={"meta": {"email": command.email}})

        result = self._validator.validate_create(command.name, command.email)
        if not result.is_valid:
            raise _validation_error(result)

        user = self._repository.create(
            NewUser(name=_clean(command.name), email=_clean(command.email))
        )
        self._logger.info("User created successfully", extra={"meta": {"userId": user.id}})
        return user

    def update_user(self, user_id: int, command: UpdateUserCommand) -> User | None:
        """Apply a partial update to an existing user.

        The existence check runs before validation, so an unknown id
        is reported as absent even when the input is also invalid.

        Args:
            user_id: Id of the user to update.
            command: Fields to change; None leaves a field untouched.

        Returns:
            The updated user, or None if the id is unknown.

        Raises:
            ValidationError: If a provided field breaks a rule.
        """
        self._logger.info("Updating user", extra={"meta": {"userId": user_id}})

        existing = self._repository.find_by_id(user_id)
        if existing is None:
            self._logger.warning(
                "Update failed - user not found", extra={"meta": {"userId": user_id}}
            )
            return None

        result = self._validator.validate_update(command.name, command.email)
        if not result.is_valid:
            raise _validation_error(result)

        changes = UserChanges(name=_clean(command.name), email=_clean(command.email))
        if changes.is_empty():
            return existing

        updated = self._repository.update(user_id, changes)
        if updated is not None:
            self._logger.info("User updated successfully", extra={"meta": {"userId": user_id}})
        return updated

    def delete_user(self, user_id: int) -> bool:
        """Remove a user. Returns False if the id is unknown."""
        self._logger.info("Deleting user", extra={"meta": {"userId": user_id}})

        deleted = self._repository.delete(user_id)
        if deleted:
            self._logger.info("User deleted successfully", extra={"meta": {"userId": user_id}})
        else:
            self._logger.warning(
                "Delete failed - user not found", extra={"meta": {"userId": user_id}}
            )
        return deleted
