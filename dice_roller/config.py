from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DICE_ROLLER_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Skill metadata reported by get_info().
    name: str = "Dice Roller"
    version: str = "1.0.0"
    description: str = "A dice rolling skill supporting standard XdY+Z notation"

    # Notation rolled when the caller passes none.
    default_notation: str = "1d6"

    # Seed for the default random source. Leave unset for fresh entropy per process.
    seed: int | None = None


settings = Settings()
