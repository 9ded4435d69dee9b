from pokedetail.clients import PokeAPIClient
from pokedetail.services import DetailScreen, PokemonDetailService
from fastapi import Depends

_poke_client = None

def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client

async def close_poke_client():
    global _poke_client
    if _poke_client is not None:
        await _poke_client.close()
        _poke_client = None

def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
) -> PokemonDetailService:
    return PokemonDetailService(poke_client=poke_client)

def get_detail_screen(
    service: PokemonDetailService = Depends(get_pokemon_service),
) -> DetailScreen:
    # One screen per request: each activation owns its own state
    return DetailScreen(service)
