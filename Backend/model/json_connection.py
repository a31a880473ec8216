# model/json_connection.py
import json
import logging
import os
import threading
from pathlib import Path

from errors import StoreUnavailable

logger = logging.getLogger(__name__)


class JsonConnection:
    """
    Un documento JSON con una colección (lista de registros).
    Cada lectura carga el documento completo y cada escritura lo reemplaza
    entero; `lock` serializa los ciclos load -> save de quienes escriben.
    """

    def __init__(self, path):
        self.path = Path(path)
        self.lock = threading.Lock()

    def inicializar(self):
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            logger.error("No se pudo crear %s: %s", self.path.parent, err)
            raise StoreUnavailable() from err
        self.save([])
        logger.info("📄 %s creado", self.path.name)

    def load(self) -> list:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as err:
            logger.error("No se pudo leer %s", self.path, exc_info=True)
            raise StoreUnavailable() from err
        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            logger.error("%s no contiene una lista de objetos JSON", self.path)
            raise StoreUnavailable()
        return data

    def save(self, data: list):
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2, allow_nan=False)
            os.replace(tmp, self.path)
        except (OSError, TypeError, ValueError) as err:
            logger.error("No se pudo escribir %s", self.path, exc_info=True)
            raise StoreUnavailable() from err
