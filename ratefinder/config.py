from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "RATEFINDER_"}

    # Solver defaults (callers may override per request)
    default_guess: float = 0.1
    default_tol: float = 1e-7

    # Stop as soon as |NPV| < tol; False runs every Newton step
    early_exit: bool = True

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]


settings = Settings()
