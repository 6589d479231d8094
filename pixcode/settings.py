from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="PIXCODE_", extra="ignore")

    pix_key: str = ""
    pix_key_type: str = ""
    merchant_name: str = ""
    merchant_city: str = ""

    qr_box_size: int = 10
    qr_border: int = 2

    log_level: str = "INFO"
    log_json: bool = False
    log_file: str = ""


settings = Settings()
