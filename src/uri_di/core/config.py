from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .hash import HashProvider, HashlibProvider

DEFAULT_ALGORITHM = "sha-256"
DEFAULT_CHUNK_SIZE = 64 * 1024

logger = logging.getLogger(__name__)


@dataclass
class DigestConfig:
    default_algorithm: str = DEFAULT_ALGORITHM
    chunk_size: int = DEFAULT_CHUNK_SIZE
    provider: HashProvider = field(default_factory=HashlibProvider)


def load_config(path: str | None = None) -> DigestConfig:
    """Load config from a JSON file. Returns default on any error."""
    if path is None:
        return DigestConfig()
    try:
        d = json.loads(Path(path).read_text("utf-8"))
        config = DigestConfig()
        if d.get("algorithm"):
            config.default_algorithm = str(d["algorithm"]).lower()
        if "chunkSize" in d:
            chunk_size = int(d["chunkSize"])
            if chunk_size > 0:
                config.chunk_size = chunk_size
        return config
    except Exception as e:
        logger.warning("could not load config from %s: %s", path, e)
        return DigestConfig()


def save_config(path: str, config: DigestConfig) -> None:
    """Write config as JSON with 2-space indent + trailing newline."""
    d = {"algorithm": config.default_algorithm, "chunkSize": config.chunk_size}
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(d, indent=2) + "\n", encoding="utf-8")
