from typing import Mapping

from pokedetail import palette as pal
from pokedetail.models import (
    DetailTab,
    DetailViewModel,
    FormEntry,
    FormsTab,
    PhysicalDetail,
    RawPokemon,
    StatEntry,
    StatRow,
    StatsTab,
    Tab,
    TabSection,
    TypeBadge,
    TypesTab,
)

STAT_TRACK_MAX = 200
ID_WIDTH = 3


def title_case(name: str) -> str:
    """Upper-cases the first character only; hyphens and inner words are left as given."""
    return name[:1].upper() + name[1:]


def padded_id(pokemon_id: int) -> str:
    return str(pokemon_id).zfill(ID_WIDTH)


def first_defined(*candidates: str | None) -> str | None:
    return next((c for c in candidates if c is not None), None)


def select_hero_image(raw: RawPokemon) -> str | None:
    return first_defined(raw.official_artwork_url, raw.sprites.front_default)


def collect_forms(raw: RawPokemon) -> list[FormEntry]:
    """Default, Shiny and Artwork, in that order, skipping slots with no URL."""
    candidates = [
        ("Default", raw.sprites.front_default),
        ("Shiny", raw.sprites.front_shiny),
        ("Artwork", raw.official_artwork_url),
    ]
    return [FormEntry(label=label, url=url) for label, url in candidates if url is not None]


def build_type_badges(raw: RawPokemon, palette: Mapping[str, str] | None = None) -> list[TypeBadge]:
    badges = []
    for type_name in raw.type_names:
        color = pal.base_color(type_name, palette)
        badges.append(
            TypeBadge(
                name=type_name,
                text_color=color,
                background_color=pal.pastelize(color, pal.BADGE_MIX),
            )
        )
    return badges


def stat_label(stat_name: str) -> str:
    return stat_name.replace("-", " ").replace("_", " ")


def fill_ratio(value: int) -> float:
    # Overflowing stats are clamped to a full track
    return min(1.0, value / STAT_TRACK_MAX)


def build_stat_rows(stats: list[StatEntry]) -> list[StatRow]:
    return [
        StatRow(
            name=entry.stat.name,
            label=stat_label(entry.stat.name),
            value=entry.base_stat,
            fill_ratio=fill_ratio(entry.base_stat),
        )
        for entry in stats
    ]


def build_detail(raw: RawPokemon) -> PhysicalDetail:
    return PhysicalDetail(
        height_dm=raw.height,
        weight_hg=raw.weight,
        height_m=raw.height / 10,
        weight_kg=raw.weight / 10,
    )


def build_view_model(raw: RawPokemon, palette: Mapping[str, str] | None = None) -> DetailViewModel:
    """
    Maps a validated PokeAPI payload to the display-ready view-model.
    Pure and total: missing images and an empty type list degrade to defaults
    (no hero image, 'normal' colours) instead of raising.
    """
    type_names = raw.type_names
    primary_type = type_names[0] if type_names else pal.DEFAULT_TYPE
    color = pal.base_color(primary_type, palette)

    return DetailViewModel(
        display_name=title_case(raw.name),
        padded_id=padded_id(raw.id),
        base_color=color,
        primary_color=pal.pastelize(color, pal.PAGE_MIX),
        hero_color=pal.pastelize(color, pal.HERO_MIX),
        chip_color=pal.pastelize(color, pal.CHIP_MIX),
        hero_image_url=select_hero_image(raw),
        forms=collect_forms(raw),
        type_badges=build_type_badges(raw, palette),
        stat_rows=build_stat_rows(raw.stats),
        detail=build_detail(raw),
    )


def tab_section(view_model: DetailViewModel, tab: Tab) -> TabSection:
    """Returns the slice of the view-model shown on the given tab."""
    if tab == Tab.FORMS:
        return FormsTab(hero_image_url=view_model.hero_image_url, forms=view_model.forms)
    if tab == Tab.DETAIL:
        return DetailTab(detail=view_model.detail)
    if tab == Tab.TYPES:
        return TypesTab(type_badges=view_model.type_badges)
    return StatsTab(stat_rows=view_model.stat_rows)
