"""
Rules Configuration - Tunable constants and house-rule policies.

The reducer takes a RulesConfig at construction. Defaults reproduce the
standard game; the policies cover rules whose intended behavior is a
table decision (attacks outside the Combat phase, capitals placed
outside the owner's territory).
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any


class AttackPhasePolicy(Enum):
    """When ATTACK_UNIT is accepted."""
    ANY_PHASE = "any_phase"
    COMBAT_ONLY = "combat_only"


class CapitalPlacementPolicy(Enum):
    """What happens when a capital centre lies outside the owner's zone."""
    WARN = "warn"  # Log a warning and place it anyway
    REJECT = "reject"


@dataclass(frozen=True)
class RulesConfig:
    """
    Configuration for the rules engine.
    """
    # Board
    board_width: int = 15
    board_height: int = 8  # 3 rows per player + 2 rows of borderlands

    # Economy
    max_gold: int = 20
    deploy_cost: int = 5

    # Fallback stats for unit cards without unitStats
    default_unit_ap: int = 2
    default_unit_hp: int = 3

    # Policies
    attack_phase_policy: AttackPhasePolicy = AttackPhasePolicy.ANY_PHASE
    capital_placement_policy: CapitalPlacementPolicy = CapitalPlacementPolicy.WARN
    require_capitals_for_setup: bool = False
    development_phases_only: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> RulesConfig:
        """Build a config from a plain dict, ignoring unknown keys."""
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        if "attack_phase_policy" in values:
            values["attack_phase_policy"] = AttackPhasePolicy(values["attack_phase_policy"])
        if "capital_placement_policy" in values:
            values["capital_placement_policy"] = CapitalPlacementPolicy(
                values["capital_placement_policy"]
            )
        return cls(**values)


DEFAULT_CONFIG = RulesConfig()
