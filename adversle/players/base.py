from __future__ import annotations
import random
from typing import Dict, List, Type

# ---- Global player registry ----
REGISTRY: Dict[str, Type["BasePlayer"]] = {}


def register(cls: Type["BasePlayer"]) -> Type["BasePlayer"]:
    """
    Decorator: @register on a player class adds it to REGISTRY by its `id`.
    """
    pid = getattr(cls, "id", None)
    if not pid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if pid in REGISTRY:
        raise ValueError(f"Duplicate player id: {pid}")
    REGISTRY[pid] = cls
    return cls


# ---- Base class that players inherit ----
class BasePlayer:
    """
    A simulated player. It sees only what a human would: the guesses it made
    and the patterns shown for them, never the target or the adversary's pool.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 5
        self.allowed: List[str] = []
        self.rng = random.Random()

    def reset(self, *, allowed: List[str], N: int, seed: int | None = None) -> None:
        self.allowed = [w for w in allowed if len(w) == N]
        self.N = int(N)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
