
from typing import Optional
from fastapi import FastAPI, Request, Depends
from fastapi.responses import JSONResponse
import logging
import uvicorn
import os
from backend.auth.function_key import function_key_auth
from backend.api.services.cpf_service import CpfValidationService

logger = logging.getLogger(__name__)

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

app = FastAPI(title="Valida CPF API", version="1.0.0")

cpf_service = CpfValidationService()


@app.on_event("startup")
async def on_startup() -> None:
    """
    Evento de inicialização da API.
    Parâmetros: None
    Retorno: None
    """
    logger.info("API de validação de CPF iniciada")


@app.on_event("shutdown")
async def on_shutdown() -> None:
    """
    Evento de desligamento da API.
    Parâmetros: None
    Retorno: None
    """
    logger.info("API de validação de CPF encerrada")


@app.get("/")
async def root() -> dict:
    """
    Endpoint de status da API.
    Retorno:
        dict: status da API
    """
    logger.info("Endpoint / chamado, status=ok")
    return {"status": "ok"}


#########
@app.post("/api/HttpValidaCpf")
async def valida_cpf(request: Request, _: Optional[str] = Depends(function_key_auth)) -> JSONResponse:
    """
    Valida o CPF enviado no corpo JSON ({"cpf": "..."}).
    O corpo é lido cru: JSON malformado vira a resposta de CPF ausente, nunca um 422/500.
    Parâmetros:
        request (Request): requisição HTTP
        _: chave de função (opcional)
    Retorno:
        JSONResponse: 200 se válido, 400 caso contrário
    """
    body = await request.body()
    status_code, result = cpf_service.validate(body)
    logger.info(f"Validação concluída: status={status_code}, success={result.success}")
    return JSONResponse(status_code=status_code, content=result.model_dump())


######### ------------------------------ #########

if __name__ == "__main__":
    """
    Inicializa o servidor Uvicorn para rodar a API.
    """
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(message)s")
    logger.info(f"Starting Uvicorn server on {API_HOST}:{API_PORT}")
    uvicorn.run(app, host=API_HOST, port=API_PORT)
