import json

import pytest

from errors import StoreUnavailable
from model.json_connection import JsonConnection


def test_inicializar_crea_documento_vacio(tmp_path):
    conn = JsonConnection(tmp_path / "nuevo" / "productos.json")
    conn.inicializar()

    assert conn.path.exists()
    assert conn.load() == []


def test_inicializar_no_pisa_documento_existente(tmp_path):
    path = tmp_path / "ventas.json"
    path.write_text('[{"id": "v1"}]', encoding="utf-8")

    JsonConnection(path).inicializar()

    assert json.loads(path.read_text(encoding="utf-8")) == [{"id": "v1"}]


def test_round_trip_conserva_orden_y_contenido(tmp_path):
    conn = JsonConnection(tmp_path / "productos.json")
    data = [
        {"id": "b", "nombre": "Mesa ñandutí", "precio": 1.5, "stock": 0},
        {"id": "a", "nombre": "Silla", "precio": 10000, "stock": 3, "extra": {"x": 1}},
    ]
    conn.save(data)

    assert conn.load() == data


def test_save_escribe_json_indentado(tmp_path):
    conn = JsonConnection(tmp_path / "productos.json")
    conn.save([{"id": "a", "nombre": "Añil"}])

    texto = conn.path.read_text(encoding="utf-8")
    assert '\n  {\n    "id": "a"' in texto
    assert "Añil" in texto
    assert not conn.path.with_name("productos.json.tmp").exists()


def test_load_archivo_inexistente(tmp_path):
    with pytest.raises(StoreUnavailable):
        JsonConnection(tmp_path / "no_existe.json").load()


def test_load_archivo_corrupto(tmp_path):
    path = tmp_path / "productos.json"
    path.write_text("[{roto", encoding="utf-8")

    with pytest.raises(StoreUnavailable):
        JsonConnection(path).load()


def test_load_documento_que_no_es_lista(tmp_path):
    path = tmp_path / "productos.json"
    path.write_text('{"id": "p1"}', encoding="utf-8")

    with pytest.raises(StoreUnavailable):
        JsonConnection(path).load()


def test_save_en_directorio_inexistente(tmp_path):
    conn = JsonConnection(tmp_path / "falta" / "productos.json")

    with pytest.raises(StoreUnavailable):
        conn.save([])


def test_load_lista_con_registros_que_no_son_objetos(tmp_path):
    path = tmp_path / "productos.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(StoreUnavailable):
        JsonConnection(path).load()


def test_save_rechaza_nan_sin_tocar_el_documento(tmp_path):
    conn = JsonConnection(tmp_path / "productos.json")
    conn.save([{"id": "p1", "precio": 100}])

    with pytest.raises(StoreUnavailable):
        conn.save([{"id": "p1", "precio": float("nan")}])

    assert conn.load() == [{"id": "p1", "precio": 100}]
