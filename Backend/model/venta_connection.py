# model/venta_connection.py
from model.json_connection import JsonConnection


class VentaConnection(JsonConnection):
    """Registro de ventas: solo se agregan registros, nunca se modifican."""

    def read_venta(self):
        return self.load()

    def filtrar_venta(self, id_venta):
        for v in self.load():
            if v.get("id") == id_venta:
                return v
        return None
