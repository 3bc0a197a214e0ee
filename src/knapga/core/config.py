from __future__ import annotations

from dataclasses import dataclass

STRATEGIES = ("roulette", "best-fit")


class InvalidConfigurationError(ValueError):
    pass


@dataclass(frozen=True)
class GAConfig:
    genome_size: int
    pool_size: int
    generations: int
    carry_fit: float
    carry_weak: float
    n_mutations: int
    strategy: str = "roulette"
    seed: int | None = None
    capacity: float = 2.0
    value_range: tuple[float, float] = (0.1, 0.9)
    weight_range: tuple[float, float] = (0.1, 0.9)

    def __post_init__(self) -> None:
        """Validate configuration parameters early to fail fast.

        Rules
        -----
        - genome_size, pool_size, generations > 0
        - carry_fit, carry_weak in [0,1]
        - n_mutations >= 0
        - strategy in {"roulette", "best-fit"}
        - seed is None or >= 0
        - capacity > 0
        - value_range / weight_range are (low, high) with 0 <= low <= high
        """
        if self.genome_size <= 0:
            raise InvalidConfigurationError("genome_size must be > 0")
        if self.pool_size <= 0:
            raise InvalidConfigurationError("pool_size must be > 0")
        if self.generations <= 0:
            raise InvalidConfigurationError("generations must be > 0")
        if not (0.0 <= self.carry_fit <= 1.0):
            raise InvalidConfigurationError("carry_fit must be in [0,1]")
        if not (0.0 <= self.carry_weak <= 1.0):
            raise InvalidConfigurationError("carry_weak must be in [0,1]")
        if self.n_mutations < 0:
            raise InvalidConfigurationError("n_mutations must be >= 0")
        if self.strategy not in STRATEGIES:
            raise InvalidConfigurationError(f"strategy must be one of {STRATEGIES}")
        if self.seed is not None and self.seed < 0:
            raise InvalidConfigurationError("seed must be >= 0 if provided")
        if self.capacity <= 0:
            raise InvalidConfigurationError("capacity must be > 0")
        for name in ("value_range", "weight_range"):
            low, high = getattr(self, name)
            if low < 0 or low > high:
                raise InvalidConfigurationError(f"{name} must satisfy 0 <= low <= high")

    @property
    def elite_count(self) -> int:
        return int(self.pool_size * self.carry_fit)
