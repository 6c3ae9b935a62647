"""Service index."""

from fastapi import APIRouter

from nomina_service.api.schemas import RootResponse

router = APIRouter(tags=["root"])

ENDPOINTS = [
    "GET /api/employees - Listar empleados",
    "POST /api/employees - Guardar empleados",
    "DELETE /api/employees/:id - Eliminar empleado",
    "GET /api/nominas - Listar nóminas",
    "POST /api/nominas - Guardar nómina",
]


@router.get("/", response_model=RootResponse)
async def index() -> RootResponse:
    return RootResponse(
        message="Servidor de Nóminas funcionando correctamente",
        endpoints=ENDPOINTS,
        frontend="Abre /app/ cuando FRONTEND_DIR apunte a la carpeta del frontend",
    )
