from __future__ import annotations
import os
import yaml
from pathlib import Path
from typing import Optional
from pydantic import BaseModel

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parents[1] / "config" / "settings.yaml"
SETTINGS_ENV_VAR = "REPORT_DASHBOARD_SETTINGS"

class AppConfig(BaseModel):
    name: str
    environment: str

class BackendConfig(BaseModel):
    base_url: str = "http://localhost:8000"
    timeout_seconds: int = 30

class CalendarConfig(BaseModel):
    batch_year_min: int = 2000
    batch_year_max: int = 2100
    default_year_type: str = "TY"

class ReportsConfig(BaseModel):
    default_max_marks: Optional[float] = None

class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

class Settings(BaseModel):
    app: AppConfig
    backend: BackendConfig = BackendConfig()
    calendar: CalendarConfig = CalendarConfig()
    reports: ReportsConfig = ReportsConfig()
    logging: LoggingConfig = LoggingConfig()

def _settings_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    override = os.environ.get(SETTINGS_ENV_VAR)
    return Path(override) if override else DEFAULT_SETTINGS_PATH

def load_settings(path: str | Path | None = None) -> Settings:
    with open(_settings_path(path), "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return Settings(
        app=AppConfig(**data["app"]),
        backend=BackendConfig(**(data.get("backend") or {})),
        calendar=CalendarConfig(**(data.get("calendar") or {})),
        reports=ReportsConfig(**(data.get("reports") or {})),
        logging=LoggingConfig(**(data.get("logging") or {})),
    )
