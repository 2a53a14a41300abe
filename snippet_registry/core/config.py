"""
Configuration management for the Snippet Registry.
Centralizes environment variable handling and application settings.
"""
import os
from pathlib import Path
from typing import Optional, List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        # API Configuration
        self.api_title = "Snippet Registry"
        self.api_description = "A catalog of JUnit 5 BDD code templates with ${placeholder} substitution"
        self.api_version = "1.0.0"
        self.debug_mode = os.getenv("DEBUG_MODE", "false").lower() == "true"
        self.api_host = os.getenv("API_HOST", "0.0.0.0")
        self.api_port = int(os.getenv("API_PORT", "8000"))
        self.allowed_origins = ["*"]

        # Catalogs
        self.include_builtin_catalog = os.getenv("INCLUDE_BUILTIN_CATALOG", "true").lower() == "true"
        self.catalog_path: Optional[str] = os.getenv("SNIPPET_CATALOG_PATH") or None

        # Rendering
        self.missing_binding_policy = os.getenv("MISSING_BINDING_POLICY", "strict").lower()

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_format = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

class CatalogConfig:
    """Locations of the catalogs shipped with the package."""

    CATALOG_DIR = Path(__file__).resolve().parent.parent / "config" / "catalogs"
    BUILTIN_CATALOGS = ["junit5_bdd.yaml"]

    @classmethod
    def get_builtin_paths(cls) -> List[Path]:
        """Get paths of all built-in catalog files."""
        return [cls.CATALOG_DIR / name for name in cls.BUILTIN_CATALOGS]

class RenderPolicy:
    """Policies for placeholders that have no binding at render time."""

    STRICT = "strict"
    KEEP = "keep"

    ALL = (STRICT, KEEP)

    @classmethod
    def is_valid(cls, policy: str) -> bool:
        """Check whether a policy name is known."""
        return policy in cls.ALL

# Create global settings instance
settings = Settings()
