from .catalog import CatalogFile, HeroEntry, MonsterEntry
from .replay import ArmyReport, InstanceReport, ReplayPayload

__all__ = [
    "ArmyReport",
    "CatalogFile",
    "HeroEntry",
    "InstanceReport",
    "MonsterEntry",
    "ReplayPayload",
]
