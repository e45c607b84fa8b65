"""Configuration management using Pydantic settings."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from geocodec.formats.wkt_keywords import DEFAULT_MAX_DEPTH


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GEOCODEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "GEOCODEC"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # WKT decoding
    wkt_max_depth: int = DEFAULT_MAX_DEPTH  # GEOMETRYCOLLECTION nesting limit

    # Reprojection: only applied when a transformer is registered on
    # app.state.transformer and both codes are set
    external_crs: Optional[str] = None  # CRS of text on the wire, e.g. "EPSG:4326"
    internal_crs: Optional[str] = None  # CRS of in-memory geometries


settings = Settings()
