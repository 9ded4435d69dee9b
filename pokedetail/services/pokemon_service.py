from pokedetail.clients.pokeapi_client import PokeAPIClient
from pokedetail.models import DetailViewModel, Tab, TabSection
from pokedetail.services.view_model_builder import build_view_model, tab_section

class PokemonDetailService:
    # Service receives the client via Dependency Injection
    def __init__(self, poke_client: PokeAPIClient):
        self._poke_client = poke_client

    async def get_detail(self, name: str) -> DetailViewModel:
        """
        Fetches one Pokemon record and derives its display-ready view-model.
        Client errors (404, 502, 503) propagate unchanged.
        """
        raw = await self._poke_client.get_pokemon(name)
        return build_view_model(raw)

    async def get_tab(self, name: str, tab: Tab) -> TabSection:
        view_model = await self.get_detail(name)
        return tab_section(view_model, tab)
