from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite:///./daybook.db"
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Comma-separated allowed origins, or "*" to allow all.
    # Example: "https://journal.example.com,http://localhost:5173"
    CORS_ORIGINS: str = "*"

    # Page sizes and windows used when the client does not ask for one.
    RECENT_ENTRIES_LIMIT: int = 50
    WISDOM_RANDOM_LIMIT: int = 3
    HEATMAP_DAYS: int = 364

    @property
    def cors_origins_list(self) -> list[str]:
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
