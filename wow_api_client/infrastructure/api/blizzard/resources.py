"""
Resource Catalog

Declarative table of the Community API resources that map one-to-one onto
a single request. Each row becomes an async accessor method on
:class:`ResourceAccessors`; accessors needing more than one request or
extra arguments live on the client itself.
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple
from urllib.parse import quote

from ....utils.validation import require

logger = logging.getLogger(__name__)


NUMBER = "number"
STRING = "string"


@dataclass(frozen=True)
class Param:
    """A required path argument."""
    name: str
    kind: str = STRING


@dataclass(frozen=True)
class ResourceSpec:
    """One accessor: path template, arguments and result shaping."""
    name: str
    path: str
    params: Tuple[Param, ...] = ()
    field: Optional[str] = None
    unwrap: Optional[str] = None
    doc: str = ""


_ID = (Param("id", NUMBER),)
_PROFILE = (Param("realm", STRING), Param("name", STRING))

CHARACTER_PATH = "character/{realm}/{name}"
GUILD_PATH = "guild/{realm}/{name}"


# (method suffix, field selector, description)
CHARACTER_FIELDS = (
    ("achievements", "achievements", "Achievement data including completion timestamps and criteria."),
    ("appearance", "appearance", "Appearance settings such as face texture and helm visibility."),
    ("feed", "feed", "The character's activity feed."),
    ("guild", "guild", "Summary of the guild the character belongs to."),
    ("hunter_pets", "hunterPets", "Combat pets the character has obtained."),
    ("items", "items", "Items equipped by the character."),
    ("mounts", "mounts", "Mounts the character has obtained."),
    ("pets", "pets", "Battle pets the character has obtained."),
    ("pet_slots", "petSlots", "The character's current battle pet slots."),
    ("professions", "professions", "The character's professions, excluding class professions."),
    ("progression", "progression", "Raids and bosses with the character's progression."),
    ("pvp", "pvp", "PvP information including arena teams and rated battlegrounds."),
    ("quests", "quests", "Quests the character has completed."),
    ("reputation", "reputation", "Factions the character has a reputation with."),
    ("statistics", "statistics", "Character statistics."),
    ("stats", "stats", "Character attributes and stats."),
    ("talents", "talents", "The character's talent structures."),
    ("titles", "titles", "Titles obtained, including the selected one."),
    ("audit", "audit", "Raw character audit data."),
)

GUILD_FIELDS = (
    ("members", "members", "Members of the guild."),
    ("achievements", "achievements", "Achievements the guild has earned."),
    ("news", "news", "The guild's news feed."),
    ("challenge", "challenge", "Top challenge mode runs of the guild."),
)


RESOURCES: Tuple[ResourceSpec, ...] = (
    ResourceSpec("achievement", "achievement/{id}", _ID, doc="Information about one achievement."),
    ResourceSpec("boss_list", "boss/", doc="All supported bosses."),
    ResourceSpec("boss", "boss/{id}", _ID, doc="Information about one boss."),
    ResourceSpec("item", "item/{id}", _ID, doc="Information about one item."),
    ResourceSpec("item_set", "item/set/{set_id}", (Param("set_id", NUMBER),), doc="Information about one item set."),
    ResourceSpec("mounts", "mount/", doc="All supported mounts."),
    ResourceSpec("pets", "pet/", doc="All supported battle and vanity pets."),
    ResourceSpec("pet_ability", "pet/ability/{ability_id}", (Param("ability_id", NUMBER),), doc="Information about one battle pet ability."),
    ResourceSpec("pet_species", "pet/species/{species_id}", (Param("species_id", NUMBER),), doc="Information about one battle pet species."),
    ResourceSpec("pet_types", "data/pet/types", doc="Battle pet types and their strengths."),
    ResourceSpec("quest", "quest/{id}", _ID, doc="Information about one quest."),
    ResourceSpec("recipe", "recipe/{id}", _ID, doc="Information about one recipe."),
    ResourceSpec("spell", "spell/{id}", _ID, doc="Information about one spell."),
    ResourceSpec("zones", "zone/", doc="All supported zones."),
    ResourceSpec("zone", "zone/{id}", _ID, doc="Information about one zone."),
    ResourceSpec("battlegroups", "data/battlegroups/", doc="Battlegroups of the region."),
    ResourceSpec("races", "data/character/races", doc="Character races."),
    ResourceSpec("classes", "data/character/classes", doc="Character classes."),
    ResourceSpec("item_classes", "data/item/classes", doc="Item classes and subclasses."),
    ResourceSpec("talents", "data/talents", doc="Talent trees of every class."),
    ResourceSpec("character_achievements_catalog", "data/character/achievements", doc="All achievements a character can earn."),
    ResourceSpec("guild_achievements_catalog", "data/guild/achievements", doc="All achievements a guild can earn."),
    ResourceSpec("guild_rewards", "data/guild/rewards", doc="Guild rewards."),
    ResourceSpec("guild_perks", "data/guild/perks", doc="Guild perks."),
    ResourceSpec("realm_status", "realm/status", unwrap="realms", doc="Realms with their current status."),
) + tuple(
    ResourceSpec(f"character_{suffix}", CHARACTER_PATH, _PROFILE, field=field, doc=doc)
    for suffix, field, doc in CHARACTER_FIELDS
) + tuple(
    ResourceSpec(f"guild_{suffix}", GUILD_PATH, _PROFILE, field=field, doc=doc)
    for suffix, field, doc in GUILD_FIELDS
)


def resolve_path(spec: ResourceSpec, values: Dict[str, Any]) -> str:
    """Validate the arguments of ``spec`` and interpolate them into its path."""
    for param in spec.params:
        require(values.get(param.name), param.name, param.kind)
    return spec.path.format(**{
        param.name: quote(str(values[param.name]).strip(), safe='')
        for param in spec.params
    })


def _build_signature(spec: ResourceSpec) -> inspect.Signature:
    parameters = [inspect.Parameter("self", inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    # Default None so an omitted argument is reported as missing, not as TypeError
    parameters.extend(
        inspect.Parameter(param.name, inspect.Parameter.POSITIONAL_OR_KEYWORD, default=None)
        for param in spec.params
    )
    return inspect.Signature(parameters)


def build_accessor(spec: ResourceSpec) -> Callable[..., Any]:
    """Create the async accessor method for one catalog row."""
    signature = _build_signature(spec)

    async def accessor(self, *args: Any, **kwargs: Any) -> Optional[Any]:
        bound = signature.bind(self, *args, **kwargs)
        bound.apply_defaults()
        path = resolve_path(spec, bound.arguments)

        if spec.field:
            return await self.fetch_sub_resource(path, spec.field)

        result = await self.fetch_resource(path)
        if result is not None and spec.unwrap:
            return result.get(spec.unwrap)
        return result

    accessor.__name__ = spec.name
    accessor.__qualname__ = f"ResourceAccessors.{spec.name}"
    accessor.__doc__ = spec.doc or None
    accessor.__signature__ = signature
    return accessor


def build_accessor_mixin(specs: Tuple[ResourceSpec, ...] = RESOURCES) -> type:
    """Build a mixin class carrying one accessor per catalog row."""
    namespace: Dict[str, Any] = {
        "__module__": __name__,
        "__doc__": "Accessors generated from the resource catalog.",
    }
    for spec in specs:
        if spec.name in namespace:
            raise ValueError(f"Duplicate accessor name in resource catalog: {spec.name}")
        namespace[spec.name] = build_accessor(spec)
    logger.debug(f"Built {len(specs)} resource accessors")
    return type("ResourceAccessors", (), namespace)


ResourceAccessors = build_accessor_mixin()
