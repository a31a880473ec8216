# config.py
# Configuración leída del entorno (.env incluido) y setup de logging

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

BASE_DIR = Path(__file__).resolve().parent

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(3000, gt=0, lt=65536)
    data_dir: Path = BASE_DIR / "data"
    static_dir: Path = BASE_DIR / "docs"
    log_level: str = "INFO"

    @property
    def productos_path(self) -> Path:
        return self.data_dir / "productos.json"

    @property
    def ventas_path(self) -> Path:
        return self.data_dir / "ventas.json"


def load_settings() -> Settings:
    """
    Lee HOST, PORT, DATA_DIR, STATIC_DIR y LOG_LEVEL del entorno.
    Las variables ausentes toman el valor por defecto del modelo.
    """
    load_dotenv()
    env = {
        "host": os.getenv("HOST"),
        "port": os.getenv("PORT"),
        "data_dir": os.getenv("DATA_DIR"),
        "static_dir": os.getenv("STATIC_DIR"),
        "log_level": os.getenv("LOG_LEVEL"),
    }
    return Settings(**{k: v for k, v in env.items() if v})


def configurar_logging(nivel: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, nivel.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
