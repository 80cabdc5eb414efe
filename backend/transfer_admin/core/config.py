from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List, Optional
from pathlib import Path

class Settings(BaseSettings):
    app_name: str = Field(default="Transfer Admin API", alias="APP_NAME")
    env: str = Field(default="dev", alias="ENV")
    secret_key: str = Field(default="devsecret", alias="SECRET_KEY")
    algorithm: str = Field(default="HS256", alias="ALGORITHM")
    # Staff sessions last a week
    access_token_expire_minutes: int = Field(default=60 * 24 * 7, alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    database_url: str | None = Field(default=None, alias="DATABASE_URL")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    # Raw env value (string), parsed to a list via property to avoid JSON decoding errors
    cors_origins_raw: Optional[str] = Field(default=None, alias="CORS_ORIGINS", description="Comma separated list of allowed CORS origins or '*'")
    # Seed users (dev/demo convenience)
    seed_admin_email: Optional[str] = Field(default=None, alias="SEED_ADMIN_EMAIL")
    seed_admin_password: Optional[str] = Field(default=None, alias="SEED_ADMIN_PASSWORD")
    seed_accountant_email: Optional[str] = Field(default=None, alias="SEED_ACCOUNTANT_EMAIL")
    seed_accountant_password: Optional[str] = Field(default=None, alias="SEED_ACCOUNTANT_PASSWORD")

    class Config:
        # Load env from backend/.env regardless of CWD
        env_file = str(Path(__file__).resolve().parents[2] / ".env")
        case_sensitive = False

    def _parse_list(self, v: Optional[str]) -> List[str]:
        if v is None:
            return []
        s = v.strip()
        if not s:
            return []
        if s.startswith("[") and s.endswith("]"):
            try:
                import json
                loaded = json.loads(s)
                if isinstance(loaded, list):
                    return [str(e).strip() for e in loaded if str(e).strip()]
            except ValueError:
                pass
        return [e.strip() for e in s.split(",") if e.strip()]

    @property
    def cors_origins(self) -> List[str]:
        items = self._parse_list(self.cors_origins_raw)
        # Fallback dev defaults (public form and admin panel ports)
        if not items:
            items = ["http://localhost:3000", "http://localhost:3001"]
        if "*" in items:
            return ["*"]
        # Dev convenience: ensure both localhost and 127.0.0.1 variants for same ports
        augmented = list(items)
        for origin in items:
            twin = None
            if origin.startswith("http://localhost:"):
                twin = origin.replace("http://localhost:", "http://127.0.0.1:", 1)
            elif origin.startswith("http://127.0.0.1:"):
                twin = origin.replace("http://127.0.0.1:", "http://localhost:", 1)
            if twin and twin not in augmented:
                augmented.append(twin)
        return augmented

    @property
    def cors_allow_credentials(self) -> bool:
        # Wildcard origin forbids credentials
        return self.cors_origins != ["*"]

settings = Settings()  # type: ignore
