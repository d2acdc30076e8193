"""
Configuration for the decision arbiter.
"""
import json
from pathlib import Path
from typing import Dict, Optional

FALLBACK_CHOICES = ('defender', 'attacker')


class ArbiterConfig:
    """Configuration for move analysis and proposal arbitration."""

    def __init__(self,
                 # Analysis
                 candidate_distance: int = 2,
                 threat_min_length: int = 3,

                 # Arbitration
                 commander_fallback: str = 'defender',
                 seed: Optional[int] = None):

        if candidate_distance < 1:
            raise ValueError("candidate_distance must be at least 1")
        if threat_min_length < 1:
            raise ValueError("threat_min_length must be at least 1")
        if commander_fallback not in FALLBACK_CHOICES:
            raise ValueError(f"commander_fallback must be one of {FALLBACK_CHOICES}")

        self.candidate_distance = candidate_distance
        self.threat_min_length = threat_min_length
        self.commander_fallback = commander_fallback
        self.seed = seed

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {k: v for k, v in self.__dict__.items()}

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'ArbiterConfig':
        """Create config from dictionary."""
        return cls(**config_dict)

    def save(self, path) -> None:
        """Write the config as JSON."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path) -> 'ArbiterConfig':
        """Read a config written by :meth:`save`."""
        with open(Path(path), 'r') as f:
            return cls.from_dict(json.load(f))

    def __eq__(self, other):
        if not isinstance(other, ArbiterConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()
