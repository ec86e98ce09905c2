import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class ConnectionConfig:
    host: str = "localhost"
    port: int = 5432
    database: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ConnectionConfig":
        """Читает DB_* из окружения (и из .env, если он есть)."""
        load_dotenv()
        return cls(
            host=os.getenv("DB_HOST", "localhost"),
            port=int(os.getenv("DB_PORT", "5432")),
            database=os.getenv("DB_NAME"),
            username=os.getenv("DB_USER"),
            password=os.getenv("DB_PASSWORD"),
        )

    def connect_kwargs(self) -> Dict[str, Any]:
        return {
            "host": self.host,
            "port": self.port,
            "dbname": self.database,
            "user": self.username,
            "password": self.password,
        }

    def __str__(self):
        # без пароля — эта строка уходит в лог
        return f"postgresql://{self.host}:{self.port}/{self.database}"


def get_log_level() -> str:
    load_dotenv()
    return os.getenv("LOG_LEVEL", "INFO").upper()
