import os
import random
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    seed: Optional[int] = None

    def make_rng(self) -> random.Random:
        """Random source for mine placement, seeded when a seed is configured."""
        return random.Random(self.seed)


# Reads the server settings from the environment. Unset variables fall
# back to the defaults above; malformed integers raise ValueError.
def load_settings() -> Settings:
    seed = os.getenv("MINESWEEPER_SEED")
    return Settings(
        host=os.getenv("MINESWEEPER_HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", 3000)),
        log_level=os.getenv("MINESWEEPER_LOG_LEVEL", "INFO").upper(),
        seed=int(seed) if seed else None,
    )
