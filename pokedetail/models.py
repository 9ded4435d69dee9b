from enum import Enum
from typing import Annotated, Literal
from pydantic import BaseModel, ConfigDict, Field

# --- Raw PokeAPI payload (Internal Contract, validated at the network boundary) ---
# Unknown keys in the payload are ignored by pydantic's default config.

class NamedResource(BaseModel):
    name: str

class OfficialArtwork(BaseModel):
    front_default: str | None = None

class OtherSprites(BaseModel):
    # PokeAPI uses a hyphenated key here, so keep the JSON name as an alias
    official_artwork: OfficialArtwork | None = Field(default=None, alias="official-artwork")

class Sprites(BaseModel):
    front_default: str | None = None
    front_shiny: str | None = None
    other: OtherSprites | None = None

class TypeSlot(BaseModel):
    slot: int = 0
    type: NamedResource

class StatEntry(BaseModel):
    base_stat: int = Field(ge=0)
    stat: NamedResource

class RawPokemon(BaseModel):
    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    height: int = Field(ge=0)  # decimetres
    weight: int = Field(ge=0)  # hectograms
    sprites: Sprites = Field(default_factory=Sprites)
    types: list[TypeSlot] = Field(default_factory=list)
    stats: list[StatEntry] = Field(default_factory=list)

    @property
    def type_names(self) -> list[str]:
        return [entry.type.name for entry in self.types]

    @property
    def official_artwork_url(self) -> str | None:
        other = self.sprites.other
        if other is None or other.official_artwork is None:
            return None
        return other.official_artwork.front_default

# --- Display-ready view-model (Public Contract) ---

class FormEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    url: str

class TypeBadge(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    text_color: str
    background_color: str

class StatRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str  # verbatim API name, used as the row key
    label: str
    value: int
    fill_ratio: float

class PhysicalDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    height_dm: int
    weight_hg: int
    height_m: float
    weight_kg: float

class DetailViewModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    display_name: str
    padded_id: str
    base_color: str
    primary_color: str
    hero_color: str
    chip_color: str
    # None means the record has no usable image
    hero_image_url: str | None
    forms: list[FormEntry]
    type_badges: list[TypeBadge]
    stat_rows: list[StatRow]
    detail: PhysicalDetail

# --- Tabs: routing only, each one exposes a slice of the view-model ---

class Tab(str, Enum):
    FORMS = "forms"
    DETAIL = "detail"
    TYPES = "types"
    STATS = "stats"

class FormsTab(BaseModel):
    tab: Literal[Tab.FORMS] = Tab.FORMS
    hero_image_url: str | None
    forms: list[FormEntry]

class DetailTab(BaseModel):
    tab: Literal[Tab.DETAIL] = Tab.DETAIL
    detail: PhysicalDetail

class TypesTab(BaseModel):
    tab: Literal[Tab.TYPES] = Tab.TYPES
    type_badges: list[TypeBadge]

class StatsTab(BaseModel):
    tab: Literal[Tab.STATS] = Tab.STATS
    stat_rows: list[StatRow]

# Discriminated on "tab" so a serialized section validates back to exactly one model
TabSection = Annotated[FormsTab | DetailTab | TypesTab | StatsTab, Field(discriminator="tab")]
