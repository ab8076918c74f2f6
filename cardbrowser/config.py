from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "CardBrowser"
    debug: bool = False

    scryfall_api_base: str = "https://api.scryfall.com"

    # Scryfall asks every client to send a descriptive User-Agent
    user_agent: str = "CardBrowser/1.0"

    request_timeout: float = 30.0

    # When True, a response that arrives after a newer request was dispatched
    # is dropped instead of replacing what is on screen.
    # False restores "last response wins".
    discard_stale_responses: bool = True

    load_sets_on_startup: bool = True


settings = Settings()
