from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "QSAR Toolbox Assistant"
    app_env: str = "development"
    app_version: str = "1.0.0"

    # Reported by /api/v1/examples as simulator metadata
    simulator_version: str = "1.0.0-MVP"

    # Artificial backend latency (seconds), always under 1s; 0/0 disables it.
    simulated_latency_min: float = Field(default=0.2, ge=0, lt=1)
    simulated_latency_max: float = Field(default=0.8, ge=0, lt=1)
    # Fix the random fallback predictor (useful for demos and reproducible runs)
    random_seed: int | None = None

    cors_origins: str = "*"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @model_validator(mode="after")
    def check_latency_range(self):
        if self.simulated_latency_min > self.simulated_latency_max:
            raise ValueError("simulated_latency_min must not exceed simulated_latency_max")
        return self


settings = Settings()
