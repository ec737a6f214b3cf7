import os
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
	# Accept a direct URL (supports either DATABASE_URL or database_url env vars)
	database_url: str | None = None

	LOG_LEVEL: str = "INFO"
	# Echo emitted SQL through the sqlalchemy.engine logger
	SQL_ECHO: bool = False

	# Prefer explicit database_url if provided; otherwise fall back to a local SQLite file
	@property
	def DATABASE_URL(self) -> str:
		if self.database_url and self.database_url.strip():
			return self.database_url.strip()
		explicit_url = os.getenv("DATABASE_URL")
		if explicit_url and explicit_url.strip():
			return explicit_url.strip()
		return "sqlite:///./jobs.db"

	model_config = SettingsConfigDict(
		env_file=".env",
		extra="ignore",
		case_sensitive=False,
	)

settings = Settings()
