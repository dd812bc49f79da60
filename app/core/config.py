"""
Configuración cargada desde variables de entorno (.env)

Todo lo que varía entre desarrollo/producción va aquí
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_env: str = "development"  # o "production"
    debug: bool = False
    log_level: str = "INFO"

    # ==================== Leaderboards ====================
    # Cantidad de entradas por defecto y tope máximo que se devuelve
    leaderboard_default_limit: int = 100
    leaderboard_max_limit: int = 500

    # Métrica de ranking cuando no se pide otra
    # total_points | accuracy | picks_correct | perfect_picks | picks_total
    default_rank_metric: str = "total_points"

    class Config:
        env_file = ".env"  # Lee desde el archivo .env
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignora campos extras del .env que no estén en el modelo


@lru_cache()
def get_settings() -> Settings:
    """Retorna la instancia de configuración (cacheada para no releerla)"""
    return Settings()
