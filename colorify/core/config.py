"""Configuration for the mood-to-palette matcher, read from the environment."""

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

from .errors import InitializationError

load_dotenv()

# Debug flag, re-read dynamically through debug_enabled()
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

# Result size
TOP_K = os.getenv("COLORIFY_TOP_K", "5")

# Embedding models (primary first, lower-capacity fallback second)
PRIMARY_MODEL = os.getenv("COLORIFY_PRIMARY_MODEL", "sentence-transformers/all-MiniLM-L12-v2")
FALLBACK_MODEL = os.getenv("COLORIFY_FALLBACK_MODEL", "sentence-transformers/all-MiniLM-L6-v2")
EMBED_PROVIDER = os.getenv("COLORIFY_EMBED_PROVIDER", "sentence")  # sentence|hash
EMBED_PROVIDERS = ("sentence", "hash")
MODEL_CACHE_DIR = os.getenv("COLORIFY_MODEL_CACHE_DIR")  # None -> library default
SHOW_PROGRESS = os.getenv("COLORIFY_SHOW_PROGRESS", "true").lower() == "true"

# Catalog override, packaged colors.json when unset
CATALOG_PATH = os.getenv("COLORIFY_CATALOG_PATH")

# Version string
VERSION = "0.1.0"

DEFAULT_TOP_K = 5


@dataclass(frozen=True)
class MatchConfiguration:
    """How many matches a query returns. Set once at startup."""

    result_limit: int = DEFAULT_TOP_K

    def __post_init__(self):
        if isinstance(self.result_limit, bool) or not isinstance(self.result_limit, int):
            raise ValueError(f"result_limit must be an integer, got {self.result_limit!r}")
        if self.result_limit < 1:
            raise ValueError(f"result_limit must be >= 1, got {self.result_limit}")

    def with_result_limit(self, result_limit: int) -> "MatchConfiguration":
        return MatchConfiguration(result_limit=result_limit)

    @classmethod
    def from_env(cls) -> "MatchConfiguration":
        """Build from COLORIFY_TOP_K, falling back to the default on bad values."""
        return cls(result_limit=get_top_k())


def get_top_k() -> int:
    """Get the configured default result size."""
    raw = os.getenv("COLORIFY_TOP_K", TOP_K)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_TOP_K
    return value if value >= 1 else DEFAULT_TOP_K


def get_embed_provider_name() -> str:
    """Get the embedding provider kind (sentence|hash)."""
    return os.getenv("COLORIFY_EMBED_PROVIDER", EMBED_PROVIDER).lower()


def get_show_progress() -> bool:
    """Check if model download/encode progress bars are shown."""
    return os.getenv("COLORIFY_SHOW_PROGRESS", str(SHOW_PROGRESS)).lower() == "true"


def get_embedding_provider():
    """Get the configured, initialized embedding provider.

    Raises InitializationError for an unknown COLORIFY_EMBED_PROVIDER and
    ModelUnavailable when the sentence-transformers models cannot be loaded.
    """
    provider_name = get_embed_provider_name()
    if provider_name not in EMBED_PROVIDERS:
        raise InitializationError(f"Invalid COLORIFY_EMBED_PROVIDER: {provider_name}")

    if provider_name == "hash":
        from colorify.vector.embeddings import DeterministicHashEmbedding
        return DeterministicHashEmbedding()

    from colorify.vector.embeddings import SentenceTransformerEmbedding
    return SentenceTransformerEmbedding.initialize(
        primary_model=os.getenv("COLORIFY_PRIMARY_MODEL", PRIMARY_MODEL),
        fallback_model=os.getenv("COLORIFY_FALLBACK_MODEL", FALLBACK_MODEL),
        cache_folder=os.getenv("COLORIFY_MODEL_CACHE_DIR", MODEL_CACHE_DIR),
        show_progress=get_show_progress(),
    )


def get_catalog_path():
    """Get the catalog JSON override path, or None for the packaged catalog."""
    return os.getenv("COLORIFY_CATALOG_PATH", CATALOG_PATH)


def debug_enabled():
    """Check if debug mode is enabled."""
    return os.getenv("DEBUG", "false").lower() == "true"


def validate_config() -> List[str]:
    """Validate configuration and return any issues."""
    issues = []

    raw_top_k = os.getenv("COLORIFY_TOP_K", TOP_K)
    try:
        if int(raw_top_k) < 1:
            issues.append("COLORIFY_TOP_K must be >= 1")
    except ValueError:
        issues.append(f"Invalid COLORIFY_TOP_K: {raw_top_k}")

    if get_embed_provider_name() not in EMBED_PROVIDERS:
        issues.append(f"Invalid COLORIFY_EMBED_PROVIDER: {get_embed_provider_name()}")

    if not os.getenv("COLORIFY_PRIMARY_MODEL", PRIMARY_MODEL).strip():
        issues.append("COLORIFY_PRIMARY_MODEL cannot be empty")

    catalog_path = get_catalog_path()
    if catalog_path and not os.path.exists(catalog_path):
        issues.append(f"COLORIFY_CATALOG_PATH does not exist: {catalog_path}")

    return issues
