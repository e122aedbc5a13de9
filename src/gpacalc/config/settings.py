from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    db_path: str = os.getenv("GPACALC_DB_PATH", "data/gpacalc.db")
    storage_key: str = os.getenv("GPACALC_STORAGE_KEY", "cgpaSemesters")
    export_dir: str = os.getenv("GPACALC_EXPORT_DIR", "exports")
    report_lines_per_page: int = int(os.getenv("GPACALC_REPORT_LINES_PER_PAGE", "27"))
    log_level: str = os.getenv("GPACALC_LOG_LEVEL", "INFO").upper()

    web_mode: bool = os.getenv("GPACALC_WEB", "0") == "1"
    port: int = int(os.getenv("PORT", "8550"))

    cors_allowed_origins: tuple[str, ...] = _split_csv(
        os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
    )


settings = Settings()
