from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends
from pokedetail.config import configure_logging
from pokedetail.dependencies import close_poke_client, get_detail_screen, get_pokemon_service
from pokedetail.models import DetailViewModel, Tab, TabSection
from pokedetail.services import DetailScreen, PokemonDetailService, ScreenState


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    yield
    await close_poke_client()


app = FastAPI(
    title="Pokedex Detail API",
    description="Serves display-ready Pokemon detail view-models derived from PokeAPI.",
    lifespan=lifespan,
)

# Endpoint 1: Full detail view-model
@app.get(
    "/pokemon/{name}",
    response_model=DetailViewModel,
    summary="Returns the display-ready detail view-model for a Pokemon",
)
async def get_pokemon_detail(
    name: str,
    service: PokemonDetailService = Depends(get_pokemon_service),
):
    """Fetches the Pokemon from PokeAPI and derives palette, hero image, forms, type badges and stat rows."""
    # Errors (404, 502, 503) are raised by the PokeAPIClient as HTTPExceptions
    return await service.get_detail(name)


# Endpoint 2: One tab of the detail view
@app.get(
    "/pokemon/{name}/tabs/{tab}",
    response_model=TabSection,
    summary="Returns the slice of the view-model shown on one tab",
)
async def get_pokemon_tab(
    name: str,
    tab: Tab,
    service: PokemonDetailService = Depends(get_pokemon_service),
):
    """Unknown tab names are rejected with 422 by path validation."""
    return await service.get_tab(name, tab)


# Endpoint 3: Screen state snapshot
@app.get(
    "/pokemon/{name}/screen",
    response_model=ScreenState,
    summary="Loads the detail screen and returns its final state",
)
async def get_pokemon_screen(
    name: str,
    screen: DetailScreen = Depends(get_detail_screen),
):
    """Always 200: fetch failures are reported as status 'error' with a message and no view-model."""
    return await screen.load(name)
