"""World archetypes: themed website templates with a fixed base value and tool set."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


class WorldArchetype(StrEnum):
    TRADE_EMPIRE = "trade-empire"
    SPACE_COLONY = "space-colony"
    ANCIENT_CIVILIZATION = "ancient-civilization"
    LIVING_ECOSYSTEM = "living-ecosystem"
    CODE_KINGDOM = "code-kingdom"
    MUSIC_REALM = "music-realm"


class WorldDefinition(BaseModel):
    """Static definition of a world archetype."""

    name: str
    emoji: str
    base_value: int = Field(alias="baseValue")
    description: str
    educational_goal: str = Field(alias="educationalGoal")
    tools: tuple[str, ...] = Field(description="Ordered tool-kind identifiers")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


WORLD_ARCHETYPES: MappingProxyType[str, WorldDefinition] = MappingProxyType(
    {
        WorldArchetype.TRADE_EMPIRE: WorldDefinition(
            name="Trade Empire",
            emoji="\U0001f3db",
            base_value=2500,
            description="Build a merchant network across a map of rival ports and markets.",
            educational_goal="Learn supply, demand and compound growth by running trade routes.",
            tools=("map-explorer", "trade-post"),
        ),
        WorldArchetype.SPACE_COLONY: WorldDefinition(
            name="Space Colony",
            emoji="\U0001f680",
            base_value=3000,
            description="Settle a distant planet and keep a young colony alive.",
            educational_goal="Understand orbital physics, ecology and resource planning.",
            tools=("resource-scanner", "habitat-builder", "orbit-simulator"),
        ),
        WorldArchetype.ANCIENT_CIVILIZATION: WorldDefinition(
            name="Ancient Civilization",
            emoji="\U0001f3fa",
            base_value=2000,
            description="Uncover a lost city one excavation at a time.",
            educational_goal="Connect archaeology, geography and history through discovery.",
            tools=("map-explorer", "artifact-museum", "timeline-scroll"),
        ),
        WorldArchetype.LIVING_ECOSYSTEM: WorldDefinition(
            name="Living Ecosystem",
            emoji="\U0001f33f",
            base_value=1800,
            description="Balance predators, prey and plants in a changing climate.",
            educational_goal="See how food webs and feedback loops shape an environment.",
            tools=("species-tracker", "food-web", "climate-dial"),
        ),
        WorldArchetype.CODE_KINGDOM: WorldDefinition(
            name="Code Kingdom",
            emoji="\U0001f451",
            base_value=2200,
            description="Rule a kingdom whose laws are written as programs.",
            educational_goal="Practice logic, decomposition and debugging by solving quests.",
            tools=("logic-gates", "puzzle-forge", "debug-quest"),
        ),
        WorldArchetype.MUSIC_REALM: WorldDefinition(
            name="Music Realm",
            emoji="\U0001f3b5",
            base_value=1600,
            description="Grow a garden of sound from rhythms, scales and chords.",
            educational_goal="Learn rhythm, harmony and composition by ear and by play.",
            tools=("rhythm-lab", "harmony-builder", "sound-garden"),
        ),
    }
)
