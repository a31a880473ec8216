# schema/venta_schema.py
from pydantic import BaseModel, conint
from typing import List, Optional

from schema.producto_schema import Numero

class ItemCarritoSchema(BaseModel):
    id: str
    cantidad: conint(gt=0)                 # > 0; el precio nunca viene del cliente

class VentaCreateSchema(BaseModel):
    carrito: Optional[List[ItemCarritoSchema]] = None

class VentaSchema(BaseModel):
    id: str
    fecha: str                             # ISO-8601 UTC, ej. 2026-10-19T12:00:00.000Z
    carrito: List[ItemCarritoSchema]
    total: Numero
