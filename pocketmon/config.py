from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- app ---
    app_name: str = "Pocket Node Monitor"
    log_level: str = "INFO"

    # --- remote collector ---
    collector_endpoint: str = "https://injest.lunar.dev"
    dashboard_url: str = "https://lunar.dev/app"

    # --- local node ---
    node_api_url: str = "http://localhost:8082"
    rpc_url: str = "http://localhost:26657"
    chain: str = "pocket"

    # --- sampling ---
    sample_interval: float = 180.0  # seconds between cycles
    request_timeout: float = 10.0

    model_config = {"env_file": ".env", "env_prefix": "POCKETMON_"}


settings = Settings()
