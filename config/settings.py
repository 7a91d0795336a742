from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Rate provider
	RATE_PROVIDER_URL: str = 'https://api.exchangerate-api.com/v4/latest'
	RATE_PROVIDER_TIMEOUT: float = 10.0
	DEFAULT_PROVIDER_NAME: str = 'Exchange Rate API'

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	# Application
	APP_NAME: str = 'Currency Conversion Tool'
	HOST: str = '0.0.0.0'
	PORT: int = 8000

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
