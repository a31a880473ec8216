from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.status import HTTP_200_OK, HTTP_201_CREATED, HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from config import Settings, load_settings, configurar_logging
from errors import TiendaError

# ---- productos
from model.producto_connection import ProductoConnection
from schema.producto_schema import ProductoCreateSchema, ProductoUpdateSchema, ProductoDeleteSchema
from service.catalogo_service import CatalogoService

# ---- ventas
from model.venta_connection import VentaConnection
from schema.venta_schema import VentaCreateSchema, VentaSchema
from service.venta_service import VentaService

logger = logging.getLogger(__name__)


# --- Dependencias: los servicios viven en app.state, no en globales ---

def get_catalogo(request: Request) -> CatalogoService:
    return request.app.state.catalogo

def get_ventas(request: Request) -> VentaService:
    return request.app.state.ventas


# --- Manejo de errores ---

async def tienda_error_handler(request: Request, exc: TiendaError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.mensaje})

async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.debug("Solicitud inválida en %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content={"error": "Solicitud inválida"})

async def error_inesperado_handler(request: Request, exc: Exception):
    logger.error("Error no controlado en %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Error interno"})


# --------- PRODUCTO ---------

producto_router = APIRouter()

@producto_router.get("/productos", status_code=HTTP_200_OK)
def listar_productos(catalogo: CatalogoService = Depends(get_catalogo)):
    return catalogo.listar()

@producto_router.get("/producto/{id}", status_code=HTTP_200_OK)
def obtener_producto(id: str, catalogo: CatalogoService = Depends(get_catalogo)):
    return catalogo.obtener(id)

@producto_router.post("/producto", status_code=HTTP_201_CREATED)
def crear_producto(prod_data: ProductoCreateSchema, catalogo: CatalogoService = Depends(get_catalogo)):
    return catalogo.crear(prod_data.model_dump())

@producto_router.put("/producto", status_code=HTTP_200_OK)
def actualizar_producto(prod_data: ProductoUpdateSchema, catalogo: CatalogoService = Depends(get_catalogo)):
    return catalogo.actualizar(prod_data.model_dump())

@producto_router.delete("/producto", status_code=HTTP_200_OK)
def eliminar_producto(payload: ProductoDeleteSchema, catalogo: CatalogoService = Depends(get_catalogo)):
    eliminado = catalogo.eliminar(payload.id)
    return {"mensaje": "Producto eliminado", "producto": eliminado}


# --------- VENTA ---------

venta_router = APIRouter()

@venta_router.get("/ventas", status_code=HTTP_200_OK)
def listar_ventas(ventas: VentaService = Depends(get_ventas)):
    return ventas.listar()

@venta_router.get("/venta/{id}", status_code=HTTP_200_OK)
def obtener_venta(id: str, ventas: VentaService = Depends(get_ventas)):
    return ventas.obtener(id)

@venta_router.post("/venta", status_code=HTTP_201_CREATED, response_model=VentaSchema)
def registrar_venta(v: VentaCreateSchema, ventas: VentaService = Depends(get_ventas)):
    carrito = [item.model_dump() for item in v.carrito] if v.carrito else None
    return ventas.registrar_venta(carrito)


# --- Configuración FastAPI ---

def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    configurar_logging(settings.log_level)

    pconn = ProductoConnection(settings.productos_path)
    vconn = VentaConnection(settings.ventas_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        pconn.inicializar()
        vconn.inicializar()
        yield

    app = FastAPI(title="Tienda artesanal", lifespan=lifespan)
    app.state.settings = settings
    app.state.catalogo = CatalogoService(pconn)
    app.state.ventas = VentaService(pconn, vconn)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=False,
    )
    app.add_exception_handler(TiendaError, tienda_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, error_inesperado_handler)

    app.include_router(producto_router)
    app.include_router(venta_router)

    # el frontend estático va al final para que las rutas de la API tengan prioridad
    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.warning("Directorio estático %s no existe; solo se sirve la API", settings.static_dir)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("🚀 API corriendo en http://localhost:%s", app.state.settings.port)
    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)
