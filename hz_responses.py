from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.orm import Session

from db import get_db
from errors import DadosInvalidos, NothingToExport, StorageUnavailable, SyncFailure
from export import EXPORT_FILENAME, build_export
from google_sheets import GoogleSheetsService, format_timestamp
from schemas import HzVaccineResponseOut, MessageResponse, ValidationErrorResponse, validate_hz_vaccine_response
from storage import DatabaseStorage

router = APIRouter(prefix="/api/hz-vaccine-responses", tags=["HZ Vaccine Responses"])

# ==================== DEPENDENCIES ====================

def get_storage(db: Session = Depends(get_db)) -> DatabaseStorage:
    return DatabaseStorage(db)


def get_sheets_service(request: Request) -> Optional[GoogleSheetsService]:
    # Criado uma vez no startup da aplicação
    return getattr(request.app.state, "sheets_service", None)

# ==================== ENDPOINTS ====================

@router.get("", response_model=List[HzVaccineResponseOut])
def listar_respostas(storage: DatabaseStorage = Depends(get_storage)):
    try:
        return storage.get_all_hz_vaccine_responses()
    except StorageUnavailable:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Erro interno do servidor")


@router.post(
    "",
    response_model=HzVaccineResponseOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse}, 500: {"model": MessageResponse}},
)
def criar_resposta(
    payload: Any = Body(None),
    storage: DatabaseStorage = Depends(get_storage),
    sheets_service: Optional[GoogleSheetsService] = Depends(get_sheets_service),
):
    try:
        dados = validate_hz_vaccine_response(payload)
    except DadosInvalidos as e:
        logger.info(f"Resposta rejeitada: {len(e.errors)} campo(s) inválido(s)")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ValidationErrorResponse(errors=e.errors).model_dump(),
        )

    try:
        resposta = storage.create_hz_vaccine_response(dados)
    except StorageUnavailable:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Erro interno do servidor")

    logger.info(f"✅ Resposta HZ registrada: id={resposta.id}")

    # Sincronização opcional; nunca falha a requisição principal
    if sheets_service:
        try:
            sheets_service.add_response(resposta, format_timestamp())
        except SyncFailure as e:
            logger.error(f"❌ Falha ao sincronizar com Google Sheets: {str(e)}")
        except Exception as e:
            logger.exception(f"❌ Erro inesperado ao sincronizar com Google Sheets: {str(e)}")

    return resposta


@router.get("/export", response_class=Response, responses={404: {"model": MessageResponse}})
def exportar_respostas(storage: DatabaseStorage = Depends(get_storage)):
    try:
        csv = build_export(storage.get_all_hz_vaccine_responses())
    except NothingToExport as e:
        logger.info("Exportação solicitada sem respostas cadastradas")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StorageUnavailable:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Erro ao exportar dados")

    return Response(
        content=csv,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}"},
    )
