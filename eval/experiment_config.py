from __future__ import annotations

import json
from dataclasses import dataclass, asdict, field
from typing import List, Optional

from strategies.registry import available_strategies

from .profiles import available_profiles, DEFAULT_PROFILE


DEFAULT_TRIALS = 100_000


@dataclass
class EvaluationConfig:
    name: str
    trial_count: int = DEFAULT_TRIALS
    strategies: List[str] = field(default_factory=available_strategies)
    composition_profile: str = DEFAULT_PROFILE
    # trial i is seeded with seed_offset + i
    seed_offset: int = 0
    out_dir: Optional[str] = None

    def validate(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("name must be a non-empty string")
        if not isinstance(self.trial_count, int) or self.trial_count <= 0:
            raise ValueError("trial_count must be a positive integer")
        if not isinstance(self.strategies, list) or len(self.strategies) == 0:
            raise ValueError("strategies must be a non-empty list")
        known = set(available_strategies())
        for s in self.strategies:
            if s not in known:
                raise ValueError(f"Unknown strategy: {s}")
        if len(set(self.strategies)) != len(self.strategies):
            raise ValueError("strategies must not contain duplicates")
        if self.composition_profile not in available_profiles():
            raise ValueError(f"Unknown composition profile: {self.composition_profile}")
        if not isinstance(self.seed_offset, int) or self.seed_offset < 0:
            raise ValueError("seed_offset must be a non-negative integer")

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @staticmethod
    def from_json(s: str) -> EvaluationConfig:
        obj = json.loads(s)
        return EvaluationConfig(
            name=obj.get("name"),
            trial_count=obj.get("trial_count", DEFAULT_TRIALS),
            strategies=list(obj.get("strategies", available_strategies())),
            composition_profile=obj.get("composition_profile", DEFAULT_PROFILE),
            seed_offset=obj.get("seed_offset", 0),
            out_dir=obj.get("out_dir"),
        )
