"""
Configuration centrale de l'application via variables d'environnement.
Charger depuis un fichier .env en développement.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Base de données (SQLite local par défaut, PostgreSQL via psycopg2 en option)
    DATABASE_URL: str = "sqlite:///schoolcli.db"
    SQL_ECHO: bool = False

    # Journalisation
    LOG_LEVEL: str = "WARNING"

    # Environnement
    ENV: str = "development"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
