# service/venta_service.py
import copy
import logging
import uuid
from collections import defaultdict
from datetime import datetime, timezone

from errors import EmptyCart, InsufficientStock, NotFound, ProductNotFound, StoreUnavailable
from model.producto_connection import ProductoConnection
from model.venta_connection import VentaConnection

logger = logging.getLogger(__name__)


def fecha_iso(ahora: datetime | None = None) -> str:
    """Timestamp UTC en ISO-8601 con milisegundos y sufijo Z."""
    ahora = ahora or datetime.now(timezone.utc)
    return ahora.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class VentaService:

    def __init__(self, pconn: ProductoConnection, vconn: VentaConnection):
        self.pconn = pconn
        self.vconn = vconn

    def listar(self):
        return self.vconn.read_venta()

    def obtener(self, id_venta):
        venta = self.vconn.filtrar_venta(id_venta)
        if venta is None:
            raise NotFound("Venta no encontrada")
        return venta

    def registrar_venta(self, carrito):
        """
        Checkout todo-o-nada.

        carrito = [{ id, cantidad }, ...] con cantidad > 0.
        1) valida todas las líneas contra el stock actual (sin tocar nada),
        2) descuenta stock y calcula el total con el precio guardado,
        3) persiste productos y luego la venta.
        Si falla cualquier validación no se escribe ningún archivo.
        """
        if not carrito:
            raise EmptyCart()

        # productos -> ventas, siempre en este orden
        with self.pconn.lock, self.vconn.lock:
            productos = self.pconn.load()
            por_id = {p.get("id"): p for p in productos}

            # 1. validación; las líneas repetidas acumulan lo pedido
            pedido = defaultdict(int)
            for item in carrito:
                producto = por_id.get(item["id"])
                if producto is None:
                    raise ProductNotFound(item["id"])
                pedido[item["id"]] += item["cantidad"]
                if producto.get("stock", 0) < pedido[item["id"]]:
                    logger.warning(
                        "Venta rechazada: stock insuficiente para %s (pedido %s, stock %s)",
                        producto.get("nombre"), pedido[item["id"]], producto.get("stock", 0),
                    )
                    raise InsufficientStock(producto.get("nombre"))

            # 2. descuento y total con precio del servidor
            originales = copy.deepcopy(productos)
            total = 0
            for item in carrito:
                producto = por_id[item["id"]]
                producto["stock"] -= item["cantidad"]
                total += producto["precio"] * item["cantidad"]

            venta = {
                "id": str(uuid.uuid4()),
                "fecha": fecha_iso(),
                "carrito": [{"id": i["id"], "cantidad": i["cantidad"]} for i in carrito],
                "total": total,
            }

            # 3. se lee el log antes de escribir para no dejar stock descontado sin venta
            ventas = self.vconn.load()
            ventas.append(venta)
            self.pconn.save(productos)
            try:
                self.vconn.save(ventas)
            except StoreUnavailable:
                logger.error("No se pudo guardar la venta %s; se restaura el stock", venta["id"])
                self.pconn.save(originales)
                raise

        logger.info("Venta registrada: %s total=%s (%d líneas)", venta["id"], total, len(carrito))
        return venta
