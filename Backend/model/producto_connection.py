# model/producto_connection.py
from model.json_connection import JsonConnection


class ProductoConnection(JsonConnection):

    def read_producto(self):
        return self.load()

    @staticmethod
    def indice_producto(productos, id_producto):
        """Posición del producto en la lista, o -1 si no existe."""
        for i, p in enumerate(productos):
            if p.get("id") == id_producto:
                return i
        return -1

    def filtrar_producto(self, id_producto):
        productos = self.load()
        i = self.indice_producto(productos, id_producto)
        return productos[i] if i >= 0 else None
