"""Fixtures compartidos: almacenamiento en un directorio temporal por test."""

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from model.producto_connection import ProductoConnection
from model.venta_connection import VentaConnection
from service.catalogo_service import CatalogoService
from service.venta_service import VentaService


@pytest.fixture
def settings(tmp_path):
    return Settings(data_dir=tmp_path / "data", static_dir=tmp_path / "docs")


@pytest.fixture
def pconn(settings):
    conn = ProductoConnection(settings.productos_path)
    conn.inicializar()
    return conn


@pytest.fixture
def vconn(settings):
    conn = VentaConnection(settings.ventas_path)
    conn.inicializar()
    return conn


@pytest.fixture
def productos():
    """Catálogo de ejemplo."""
    return [
        {"id": "p1", "nombre": "Silla", "precio": 10000, "stock": 2, "categoria": "muebles"},
        {"id": "p2", "nombre": "Cuenco", "precio": 4500, "stock": 10, "categoria": "cocina"},
        {"id": "p3", "nombre": "Telar", "precio": 32990, "stock": 1, "categoria": "textil"},
    ]


@pytest.fixture
def catalogo(pconn, productos):
    pconn.save(productos)
    return CatalogoService(pconn)


@pytest.fixture
def ventas(pconn, vconn, productos):
    pconn.save(productos)
    return VentaService(pconn, vconn)


@pytest.fixture
def client(settings, pconn, vconn, productos):
    pconn.save(productos)
    with TestClient(create_app(settings)) as c:
        yield c
