"""Local user session."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from sugar_tracker.domain.models import MutationResult, UserRecord
from sugar_tracker.services.codec import parse_user, user_to_row
from sugar_tracker.services.ids import new_id
from sugar_tracker.services.storage import SESSION_KEY, PersistentStore
from sugar_tracker.services.validation import require_text

PLACEHOLDER_USER_ID = "1"

_logger = logging.getLogger(__name__)


@dataclass
class SessionService:
    """Holds the current user.

    This is a local placeholder for identity, not an authentication boundary:
    passwords are required but never checked or stored.
    """

    store: PersistentStore
    id_factory: Callable[[], str] = new_id
    loading: bool = field(default=True, init=False)
    _user: UserRecord | None = field(default=None, init=False)

    async def load(self) -> None:
        """Restore a previously persisted session, if any."""
        try:
            row = await self.store.load(SESSION_KEY)
            if row is None:
                return
            try:
                self._user = parse_user(row)
            except (AttributeError, KeyError, TypeError):
                _logger.warning("Ignoring malformed stored session")
        finally:
            self.loading = False

    @property
    def current(self) -> UserRecord | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    async def login(
        self, email: str | None, password: str | None
    ) -> MutationResult[UserRecord]:
        """Start a session for the email; the username is its local part."""
        cleaned_email = require_text(email, "email", "Please fill in all fields")
        require_text(password, "password", "Please fill in all fields")
        user = UserRecord(
            id=PLACEHOLDER_USER_ID,
            username=cleaned_email.split("@")[0],
            email=cleaned_email,
        )
        return await self._start(user)

    async def register(
        self, username: str | None, email: str | None, password: str | None
    ) -> MutationResult[UserRecord]:
        """Create a local user and start a session for it."""
        cleaned_username = require_text(
            username, "username", "Please fill in all fields"
        )
        cleaned_email = require_text(email, "email", "Please fill in all fields")
        require_text(password, "password", "Please fill in all fields")
        user = UserRecord(
            id=self.id_factory(), username=cleaned_username, email=cleaned_email
        )
        return await self._start(user)

    async def logout(self) -> MutationResult[None]:
        """Clear the session and remove it from storage."""
        self._user = None
        persisted = await self.store.remove(SESSION_KEY)
        if not persisted:
            _logger.warning("Logout not persisted; session may return on restart")
        return MutationResult(value=None, persisted=persisted)

    async def _start(self, user: UserRecord) -> MutationResult[UserRecord]:
        self._user = user
        persisted = await self.store.save(SESSION_KEY, user_to_row(user))
        if not persisted:
            _logger.warning("Session for %s kept in memory only", user.username)
        return MutationResult(value=user, persisted=persisted)
