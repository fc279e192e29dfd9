from sqlalchemy.engine import URL
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Inventory Tracker"

    # PostgreSQL connection parts (ignored when DATABASE_URL is set)
    DB_HOST: str = "localhost"
    DB_USER: str = "me"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "inventory_app"
    DB_PORT: int = 5432

    # Full SQLAlchemy URL, e.g. sqlite:///./inventory.db
    DATABASE_URL: str = ""
    SQL_ECHO: bool = False

    PORT: int = 9001
    LOG_LEVEL: str = "INFO"

    # Comma-separated list of allowed origins
    CORS_ORIGINS: str = "*"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "postgresql+psycopg2",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        ).render_as_string(hide_password=False)

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
