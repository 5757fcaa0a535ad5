"""
Application settings.
Only logging reads the environment; everything that changes behaviour comes from the CLI.
"""
from functools import lru_cache
from typing import Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv(find_dotenv(usecwd=True))


class APIKeys(BaseSettings):
    """API keys - optional, logs stay local without them."""
    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    logfire_token: Optional[SecretStr] = None  # LOGFIRE_TOKEN env var


class Logfire(BaseSettings):
    """Logfire settings."""
    model_config = SettingsConfigDict(env_prefix="LOGFIRE_", extra="ignore")

    environment: str = "local"
    console: bool = True


class Server(BaseModel):
    """HTTP server defaults, overridden by CLI flags."""
    host: str = "0.0.0.0"
    default_port: int = 3000
    shutdown_timeout: float = 1.0
    decisions_dir: str = ".decisions"


class Export(BaseModel):
    """Spreadsheet export layout and tones."""
    sheet_title: str = "Decision Matrix"
    criteria_column_width: int = 25
    option_column_width: int = 30

    decision_fill: str = "1F4E79"             # Dark blue
    option_fill: str = "2E75B6"               # Mid blue
    header_font: str = "FFFFFF"               # White
    decision_description_fill: str = "D6DCE4" # Light slate
    option_description_fill: str = "DDEBF7"   # Light blue
    criteria_fill: str = "F2F2F2"             # Light gray
    border: str = "D9D9D9"                    # Light gray

    cell_fills: Dict[str, str] = {
        "red": "FFCCCC",
        "yellow": "FFFFCC",
        "green": "CCFFCC",
    }


class Watch(BaseModel):
    """File watcher tuning (watchfiles batching window)."""
    debounce_ms: int = 50
    step_ms: int = 50
    force_polling: bool = False
    poll_delay_ms: int = 300


class Settings(BaseSettings):
    """Main settings container."""
    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
    )

    # Nested settings
    api_keys: APIKeys = APIKeys()
    logfire: Logfire = Logfire()
    server: Server = Server()
    export: Export = Export()
    watch: Watch = Watch()

    service_name: str = "matrix-reloaded"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

settings = get_settings()
