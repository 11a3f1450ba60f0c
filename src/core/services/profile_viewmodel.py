"""View model del perfil: estado de presentación + acción `reload`.

This module owns the only mutable state of the application. The view layer
(CLI today) calls `reload()` and reads the derived strings; it never touches
the service directly.

Ordering rules:
- While a reload is loading, a plain `reload()` is ignored (no queue, no
  second network call).
- `reload(force=True)` supersedes the in-flight reload: the generation counter
  moves forward and the previous fetch is cancelled. Only the latest
  generation may write to the state.
- `close()` cancels the in-flight fetch; a cancelled reload writes nothing and
  reports no user-visible error.
- If the task awaiting `reload()` is cancelled, the state goes back to what it
  was before that reload and `CancelledError` propagates.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum

from core.domain.errors import Cancelled, RandomUserError
from core.domain.models import User
from core.interfaces.user_service import RandomUserServiceProtocol
from core.logging_config import get_logger

logger = get_logger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class ReloadStatus(str, Enum):
    """How a `reload()` call ended, from the caller's point of view."""

    LOADED = "loaded"
    FAILED = "failed"
    IGNORED = "ignored"
    SUPERSEDED = "superseded"
    CANCELLED = "cancelled"


@dataclass
class PresentationState:
    """Estado de la pantalla. Solo `ProfileViewModel.reload` lo muta."""

    profile: User | None = None
    is_loading: bool = False
    error_message: str | None = None
    error: Exception | None = None
    phase: Phase = Phase.IDLE


@dataclass(frozen=True)
class ReloadOutcome:
    status: ReloadStatus
    profile: User | None = None
    error: Exception | None = None

    @property
    def applied(self) -> bool:
        return self.status in (ReloadStatus.LOADED, ReloadStatus.FAILED)


class ProfileViewModel:
    """Presentation adapter over a `RandomUserServiceProtocol`."""

    def __init__(self, service: RandomUserServiceProtocol) -> None:
        self._service = service
        self.state = PresentationState()
        self._generation = 0
        self._inflight: asyncio.Task[User] | None = None
        self._closed = False

    @property
    def user(self) -> User | None:
        return self.state.profile

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    @property
    def error_message(self) -> str | None:
        return self.state.error_message

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def closed(self) -> bool:
        return self._closed

    def _is_current(self, generation: int) -> bool:
        return not self._closed and generation == self._generation

    def _discarded(self, generation: int) -> ReloadOutcome:
        if self._closed:
            logger.debug("reload_cancelled", generation=generation)
            return ReloadOutcome(ReloadStatus.CANCELLED, error=Cancelled())
        logger.debug("reload_superseded", generation=generation, latest=self._generation)
        return ReloadOutcome(ReloadStatus.SUPERSEDED)

    async def reload(self, *, force: bool = False) -> ReloadOutcome:
        if self._closed:
            return ReloadOutcome(ReloadStatus.CANCELLED, error=Cancelled())
        if self.state.is_loading and not force:
            logger.debug("reload_ignored", generation=self._generation)
            return ReloadOutcome(ReloadStatus.IGNORED)

        previous = (
            self.state.is_loading,
            self.state.phase,
            self.state.error,
            self.state.error_message,
        )
        self._generation += 1
        generation = self._generation
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()

        self.state.is_loading = True
        self.state.error_message = None
        self.state.error = None
        self.state.phase = Phase.LOADING

        task = asyncio.create_task(self._service.fetch_user())
        self._inflight = task
        try:
            user = await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                if generation == self._generation:
                    # Caller gave up; the view model stays usable.
                    (
                        self.state.is_loading,
                        self.state.phase,
                        self.state.error,
                        self.state.error_message,
                    ) = previous
                raise
            return self._discarded(generation)
        except Exception as exc:
            if not self._is_current(generation):
                return self._discarded(generation)
            message = exc.message if isinstance(exc, RandomUserError) else str(exc)
            self.state.error = exc
            self.state.error_message = message
            self.state.is_loading = False
            self.state.phase = Phase.FAILED
            logger.info("reload_failed", generation=generation, error=type(exc).__name__)
            return ReloadOutcome(ReloadStatus.FAILED, error=exc)
        finally:
            if self._inflight is task:
                self._inflight = None

        if not self._is_current(generation):
            return self._discarded(generation)

        self.state.profile = user
        self.state.is_loading = False
        self.state.phase = Phase.LOADED
        logger.debug("reload_applied", generation=generation, user_id=user.id)
        return ReloadOutcome(ReloadStatus.LOADED, profile=user)

    def close(self) -> None:
        """Fin de la sesión: cancela el fetch en vuelo, si lo hay."""

        self._closed = True
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()

    async def load_users(self, count: int = 10) -> list[User]:
        return await self._service.fetch_users(count)

    def formatted_email_info(self) -> str | None:
        user = self.state.profile
        if user is None:
            return None
        return f"{user.email}\nUsername: {user.login.username}"

    def formatted_phone_info(self) -> str | None:
        user = self.state.profile
        if user is None:
            return None
        return f"Phone: {user.phone}\nCell: {user.cell}"

    @property
    def display_name(self) -> str | None:
        user = self.state.profile
        return user.name.full_name if user else None

    @property
    def age_text(self) -> str | None:
        user = self.state.profile
        return user.age_text if user else None

    @property
    def location_text(self) -> str | None:
        user = self.state.profile
        return user.location.summary if user else None

    @property
    def picture_url(self) -> str | None:
        user = self.state.profile
        return user.picture.large if user else None
