# errors.py
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class TiendaError(Exception):
    """Error de negocio con su código HTTP y un mensaje apto para el cliente."""
    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    mensaje = "Error interno"

    def __init__(self, mensaje: str | None = None):
        if mensaje is not None:
            self.mensaje = mensaje
        super().__init__(self.mensaje)


class ValidationError(TiendaError):
    status_code = HTTP_400_BAD_REQUEST
    mensaje = "Datos inválidos"


class EmptyCart(TiendaError):
    status_code = HTTP_400_BAD_REQUEST
    mensaje = "El carrito está vacío"


class NotFound(TiendaError):
    status_code = HTTP_404_NOT_FOUND
    mensaje = "Producto no encontrado"


class ProductNotFound(NotFound):
    def __init__(self, id_producto: str):
        self.id_producto = id_producto
        super().__init__(f"Producto {id_producto} no encontrado")


class InsufficientStock(TiendaError):
    status_code = HTTP_409_CONFLICT

    def __init__(self, nombre: str):
        self.nombre = nombre
        super().__init__(f"Stock insuficiente para {nombre}")


class StoreUnavailable(TiendaError):
    # el detalle (ruta, errno) va al log, nunca al cliente
    mensaje = "Error de almacenamiento"
