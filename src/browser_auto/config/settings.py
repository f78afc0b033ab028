"""
Settings - Pydantic models for type-safe configuration.

The selector and structure algorithms never read global configuration:
callers pass a SelectorSettings or StructureSettings instance explicitly
(or accept the defaults). The root Settings container only gathers them
for the CLI and for config files.

Example:
    >>> from browser_auto.config import Settings, load_config
    >>> settings = load_config()  # Loads from env, yaml, and defaults
    >>> print(settings.structure.limit)
    5000
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_ATTRIBUTE_KEYS = ["id", "class", "placeholder"]


class SelectorSettings(BaseModel):
    """
    Selector synthesis limits.
    
    Attributes:
        max_length: Hard cap on the length of any verified selector
        anchor_depth: Ancestor levels searched for the nearest unique anchor
        widen_depth: Extra ancestor levels searched by the secondary ladder
        max_classes: Stable classes kept per element
        max_attributes: Stable attribute fragments kept per element
        max_attribute_value_length: Longest attribute value used in a fragment
        extra_data_attributes: Non-standard data-* attributes considered
        max_text_length: Longest trimmed text used for text selectors
        path_depth: Levels climbed by the path selector before giving up
    """
    max_length: int = Field(default=160, ge=16, le=2000)
    anchor_depth: int = Field(default=6, ge=1, le=50)
    widen_depth: int = Field(default=3, ge=0, le=50)
    max_classes: int = Field(default=3, ge=1, le=10)
    max_attributes: int = Field(default=3, ge=1, le=10)
    max_attribute_value_length: int = Field(default=40, ge=1, le=500)
    extra_data_attributes: int = Field(default=2, ge=0, le=10)
    max_text_length: int = Field(default=24, ge=1, le=500)
    path_depth: int = Field(default=5, ge=1, le=50)


class StructureSettings(BaseModel):
    """
    Structure snapshot budget.
    
    Attributes:
        limit: Target serialized length in characters
        attribute_keys: Ordered attribute keys collected per node
        start_depth: First depth tried
        max_depth: Hard ceiling on tree depth
        ui_attribute: Marker attribute on the tool's own injected UI
        skip_tags: Tags never included in a snapshot
    """
    limit: int = Field(default=5000, gt=0)
    attribute_keys: List[str] = Field(default_factory=lambda: list(DEFAULT_ATTRIBUTE_KEYS))
    start_depth: int = Field(default=2, ge=1, le=50)
    max_depth: int = Field(default=20, ge=1, le=50)
    ui_attribute: str = "data-browser-auto-ui"
    skip_tags: List[str] = Field(default_factory=lambda: ["style", "script", "svg", "img"])
    
    @field_validator("attribute_keys")
    @classmethod
    def _default_when_empty(cls, value: List[str]) -> List[str]:
        return value or list(DEFAULT_ATTRIBUTE_KEYS)


class BrowserSettings(BaseModel):
    """
    Live capture settings.
    
    Attributes:
        headless: Run browser in headless mode
        browser_type: Playwright browser to launch
        timeout_ms: Navigation timeout
        viewport_width: Browser viewport width in pixels
        viewport_height: Browser viewport height in pixels
        wait_until: Load state awaited before capturing
    """
    headless: bool = True
    browser_type: Literal["chromium", "firefox", "webkit"] = "chromium"
    timeout_ms: int = Field(default=30000, ge=1000, le=300000)
    viewport_width: int = Field(default=1280, ge=320, le=3840)
    viewport_height: int = Field(default=720, ge=240, le=2160)
    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = "load"


class LoggingSettings(BaseModel):
    """
    Logging configuration.
    
    Attributes:
        level: Log level
        file: Log file path (None for console only)
        json_format: Use JSON format for the file log
    """
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file: Optional[str] = None
    json_format: bool = False


class Settings(BaseSettings):
    """
    Root settings container.
    
    Settings are loaded in this priority order (highest to lowest):
    1. Explicit values passed to constructor
    2. Environment variables (prefixed with BROWSER_AUTO__)
    3. Config file (YAML)
    4. Default values
    
    Example:
        >>> settings = Settings()  # Load from env vars
        >>> settings = Settings(structure=StructureSettings(limit=2000))
    """
    
    model_config = SettingsConfigDict(
        env_prefix="BROWSER_AUTO__",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )
    
    selectors: SelectorSettings = Field(default_factory=SelectorSettings)
    structure: StructureSettings = Field(default_factory=StructureSettings)
    browser: BrowserSettings = Field(default_factory=BrowserSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    
    debug: bool = False
    
    def merge_with(self, overrides: dict) -> "Settings":
        """
        Create a new Settings instance with overrides applied.
        
        Args:
            overrides: Dictionary of values to override
            
        Returns:
            New Settings instance with overrides applied
        """
        current = self.model_dump()
        
        def deep_merge(base: dict, updates: dict) -> dict:
            for key, value in updates.items():
                if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                    deep_merge(base[key], value)
                else:
                    base[key] = value
            return base
        
        merged = deep_merge(current, overrides)
        return Settings(**merged)
