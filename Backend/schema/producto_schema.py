from pydantic import BaseModel, confloat
from typing import Optional, Union

# NaN/Infinity no son JSON válido: se rechazan con 400 antes de llegar al archivo
Numero = Union[int, confloat(allow_inf_nan=False)]

class ProductoCreateSchema(BaseModel):
    # obligatorios: nombre, precio y stock (se validan en el servicio -> 400)
    nombre: Optional[str] = None
    precio: Optional[Numero] = None
    stock: Optional[int] = None
    categoria: Optional[str] = None
    artesano: Optional[str] = None
    descripcion: Optional[str] = None
    imagen: Optional[str] = None

class ProductoUpdateSchema(ProductoCreateSchema):
    id: Optional[str] = None

class ProductoDeleteSchema(BaseModel):
    id: Optional[str] = None
