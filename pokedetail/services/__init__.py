"""Business logic: view-model derivation, detail service and screen state."""
from .pokemon_service import PokemonDetailService
from .detail_screen import DetailScreen, ScreenState, ScreenStatus

__all__ = [
    'PokemonDetailService',
    'DetailScreen',
    'ScreenState',
    'ScreenStatus'
]
