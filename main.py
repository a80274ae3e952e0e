from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, HTTPException, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

# ==================== IMPORTS ====================
from config import settings
from db import init_db
from google_sheets import initialize_google_sheets
from schemas import FieldError, ValidationErrorResponse
import hz_responses

logger.add(settings.log_file, rotation="1 week", retention="4 weeks", level=settings.log_level)

# ==================== STARTUP/SHUTDOWN ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 API iniciando...")
    init_db()

    app.state.sheets_service = initialize_google_sheets(settings)
    if app.state.sheets_service:
        try:
            app.state.sheets_service.initialize_sheet()
            logger.info("✅ Integração com Google Sheets inicializada")
        except Exception as e:
            # A integração é opcional; a API sobe mesmo assim
            logger.warning(f"Falha ao inicializar Google Sheets: {str(e)}")

    logger.info("✅ API pronta para receber requisições!")
    yield
    logger.info("🛑 API encerrando...")

# Criar aplicação FastAPI
app = FastAPI(
    title="HZ Vaccine Survey API",
    description="Coleta de respostas sobre a vacina de Herpes Zoster no ponto de venda",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(hz_responses.router)

# ==================== ROTAS BÁSICAS ====================

@app.get("/", tags=["Health Check"])
async def root():
    return {
        "message": "✅ API Vacina HZ está rodando!",
        "status": "online",
        "timestamp": datetime.now().isoformat()
    }

@app.get("/health", tags=["Health Check"])
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": "1.0.0"
    }

# ==================== TRATAMENTO DE ERROS ====================

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request, exc):
    # JSON malformado cai aqui; mesmo formato dos erros de validação
    errors = [
        FieldError(field=".".join(str(p) for p in e["loc"]), message=e["msg"])
        for e in exc.errors()
    ]
    logger.info(f"Requisição inválida em {request.url.path}: {len(errors)} erro(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationErrorResponse(errors=errors).model_dump(),
    )

@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    if exc.status_code >= 500:
        logger.error(f"HTTP Error: {exc.status_code} - {exc.detail}")
    else:
        logger.info(f"HTTP {exc.status_code} - {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "message": exc.detail,
            "status_code": exc.status_code,
            "timestamp": datetime.now().isoformat()
        },
    )

@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    logger.exception(f"Erro não tratado: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "message": "Erro interno do servidor",
            "status_code": 500,
            "timestamp": datetime.now().isoformat()
        },
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True, log_level="info")
