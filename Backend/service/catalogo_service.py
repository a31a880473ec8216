# service/catalogo_service.py
import logging
import uuid

from errors import NotFound, ValidationError
from model.producto_connection import ProductoConnection

logger = logging.getLogger(__name__)

CAMPOS_EDITABLES = ("nombre", "precio", "stock", "categoria", "artesano", "descripcion", "imagen")


class CatalogoService:
    """CRUD del catálogo sobre el documento de productos."""

    def __init__(self, pconn: ProductoConnection):
        self.pconn = pconn

    def listar(self):
        return self.pconn.read_producto()

    def obtener(self, id_producto):
        producto = self.pconn.filtrar_producto(id_producto)
        if producto is None:
            raise NotFound()
        return producto

    def crear(self, data: dict):
        nombre = data.get("nombre")
        if not nombre or data.get("precio") is None or data.get("stock") is None:
            raise ValidationError("Faltan datos: nombre, precio y stock son obligatorios")

        nuevo = {"id": str(uuid.uuid4())}
        nuevo.update({k: data[k] for k in CAMPOS_EDITABLES if data.get(k) is not None})

        with self.pconn.lock:
            productos = self.pconn.load()
            productos.append(nuevo)
            self.pconn.save(productos)
        logger.info("Producto creado: %s (%s)", nuevo["nombre"], nuevo["id"])
        return nuevo

    def actualizar(self, data: dict):
        """
        Actualización parcial: solo cambian los campos presentes y no nulos.
        No valida stock ni precio negativos (solo el checkout protege el stock).
        """
        id_producto = data.get("id")
        if not id_producto:
            raise ValidationError("El id es obligatorio")

        with self.pconn.lock:
            productos = self.pconn.load()
            i = self.pconn.indice_producto(productos, id_producto)
            if i == -1:
                raise NotFound()
            for campo in CAMPOS_EDITABLES:
                if data.get(campo) is not None:
                    productos[i][campo] = data[campo]
            self.pconn.save(productos)
        logger.info("Producto actualizado: %s", id_producto)
        return productos[i]

    def eliminar(self, id_producto):
        if not id_producto:
            raise ValidationError("El id es obligatorio")

        with self.pconn.lock:
            productos = self.pconn.load()
            i = self.pconn.indice_producto(productos, id_producto)
            if i == -1:
                raise NotFound()
            eliminado = productos.pop(i)
            self.pconn.save(productos)
        logger.info("Producto eliminado: %s", id_producto)
        return eliminado
