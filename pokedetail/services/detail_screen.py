"""
State container for one detail screen instance.

The screen moves between idle, loading, success and error in response to
identifier changes and fetch completions. ``transition`` is the only place
that decides the next state; ``DetailScreen`` owns the asyncio task that
performs the fetch and feeds completion events back into it.
"""
import asyncio
import logging
from dataclasses import dataclass
from enum import Enum

from fastapi import HTTPException
from pydantic import BaseModel, ConfigDict

from pokedetail.models import DetailViewModel
from pokedetail.services.pokemon_service import PokemonDetailService

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Something went wrong"


class ScreenStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ScreenState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: ScreenStatus = ScreenStatus.IDLE
    requested_name: str | None = None
    view_model: DetailViewModel | None = None
    error: str | None = None


@dataclass(frozen=True)
class NameRequested:
    name: str | None


@dataclass(frozen=True)
class FetchSucceeded:
    name: str
    view_model: DetailViewModel


@dataclass(frozen=True)
class FetchFailed:
    name: str
    message: str


ScreenEvent = NameRequested | FetchSucceeded | FetchFailed


def transition(state: ScreenState, event: ScreenEvent) -> ScreenState:
    """Returns the next state, or ``state`` itself when the event changes nothing."""
    if isinstance(event, NameRequested):
        if not (event.name or "").strip():
            return state
        if event.name == state.requested_name and state.status != ScreenStatus.IDLE:
            return state
        return ScreenState(status=ScreenStatus.LOADING, requested_name=event.name)

    # Completions for anything other than the in-flight name are stale
    if state.status != ScreenStatus.LOADING or event.name != state.requested_name:
        return state

    if isinstance(event, FetchSucceeded):
        return ScreenState(
            status=ScreenStatus.SUCCESS,
            requested_name=event.name,
            view_model=event.view_model,
        )
    return ScreenState(status=ScreenStatus.ERROR, requested_name=event.name, error=event.message)


class DetailScreen:
    def __init__(self, service: PokemonDetailService):
        self._service = service
        self._task: asyncio.Task | None = None
        self.state = ScreenState()

    def _apply(self, event: ScreenEvent) -> bool:
        new_state = transition(self.state, event)
        if new_state is self.state:
            return False
        logger.debug(f"Screen {self.state.status.value} -> {new_state.status.value} ({new_state.requested_name})")
        self.state = new_state
        return True

    async def _fetch(self, name: str):
        try:
            view_model = await self._service.get_detail(name)
        except HTTPException as e:
            self._apply(FetchFailed(name=name, message=str(e.detail)))
        except Exception:
            logger.exception(f"Unexpected error while loading {name}")
            self._apply(FetchFailed(name=name, message=FALLBACK_ERROR_MESSAGE))
        else:
            self._apply(FetchSucceeded(name=name, view_model=view_model))

    def _cancel_pending(self):
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def request(self, name: str | None) -> asyncio.Task | None:
        """
        Reacts to a (possibly new) identifier.
        Starts one fetch when the identifier changed, cancelling the previous one.
        Must be called from a running event loop.
        """
        if not self._apply(NameRequested(name=name)):
            return self._task
        self._cancel_pending()
        self._task = asyncio.create_task(self._fetch(self.state.requested_name))
        return self._task

    async def load(self, name: str | None) -> ScreenState:
        task = self.request(name)
        if task is not None:
            # asyncio.wait does not raise if a newer request cancelled this task
            await asyncio.wait({task})
        return self.state

    def close(self):
        """Cancels any pending fetch and resets the screen to idle."""
        self._cancel_pending()
        self.state = ScreenState()
