# mail_relay/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List, Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    api_title: str = Field(default="Contact Relay API", alias="API_TITLE")
    cors_origins: str = Field(default="http://localhost:3000", alias="CORS_ORIGINS")
    port: int = Field(default=3001, alias="PORT")

    # SMTP provider. Defaults target Gmail with an app password.
    smtp_host: str = Field(default="smtp.gmail.com", alias="SMTP_HOST")
    smtp_port: int = Field(default=465, alias="SMTP_PORT")
    # True = implicit TLS (465); False = plain connect + STARTTLS when offered (587)
    smtp_use_ssl: bool = Field(default=True, alias="SMTP_USE_SSL")
    smtp_timeout: float = Field(default=30.0, alias="SMTP_TIMEOUT")
    smtp_username: Optional[str] = Field(default=None, alias="SMTP_USERNAME")
    smtp_password: Optional[str] = Field(default=None, alias="SMTP_PASSWORD")

    # Operator mailbox; both fall back to the SMTP login
    mail_from: Optional[str] = Field(default=None, alias="MAIL_FROM")
    mail_to: Optional[str] = Field(default=None, alias="MAIL_TO")

    # Where the contact client posts submissions
    relay_url: str = Field(default="http://localhost:3001/send-email", alias="RELAY_URL")

    @property
    def allowed_origins(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def sender(self) -> Optional[str]:
        return self.mail_from or self.smtp_username

    @property
    def recipient(self) -> Optional[str]:
        return self.mail_to or self.sender

settings = Settings()
