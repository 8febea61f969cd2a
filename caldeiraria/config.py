from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Caldeiraria Calculators"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # Calculator defaults
    DEFAULT_MATERIAL: str = "steel"
    CURVE_DIVISIONS: int = 12          # Development template divisions (pipe branch, elbow)
    STRUCTURAL_YIELD_MPA: float = 250.0  # A36 structural steel, approx.

    class Config:
        env_file = ".env"


settings = Settings()
