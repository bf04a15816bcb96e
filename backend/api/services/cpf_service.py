"""
Serviço de validação de CPF: interpreta o corpo da requisição, aplica o
algoritmo dos dígitos verificadores e monta o envelope de resposta.
Não depende do FastAPI, o que facilita os testes.
"""
from typing import Optional, Tuple
import json
import logging
from pydantic import ValidationError
from backend.api.schemas import CpfRequest, CpfResponse
from backend.utils.cpf_utils import CPFUtils

MSG_VALIDO = "CPF válido"
MSG_INVALIDO = "CPF inválido"
MSG_AUSENTE = "Por favor, forneça um CPF no corpo da requisição."


class CpfValidationService:
    def __init__(self, logger=None):
        """
        Inicializa o serviço de validação.
        Parâmetros:
            logger (logging.Logger, opcional): Logger para logs
        """
        if logger is None:
            logger = logging.getLogger("cpf_service")
            logger.setLevel(logging.INFO)
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            if not logger.hasHandlers():
                logger.addHandler(handler)
        self.logger = logger

    def parse_payload(self, body: bytes) -> Optional[CpfRequest]:
        """
        Converte o corpo bruto no modelo da requisição.
        Parâmetros:
            body (bytes): corpo HTTP
        Retorno:
            CpfRequest ou None se o corpo estiver vazio ou não puder ser lido
        """
        # JSONDecodeError e UnicodeDecodeError são ValueError, assim como inteiros gigantes
        try:
            text = body.decode("utf-8-sig")
            if not text.strip():
                return None
            data = json.loads(text)
        except (ValueError, RecursionError) as exc:
            self.logger.warning(f"Corpo da requisição não é JSON válido: {exc}")
            return None
        if not isinstance(data, dict):
            self.logger.warning(f"Corpo da requisição não é um objeto JSON: {type(data).__name__}")
            return None
        try:
            return CpfRequest.model_validate(data)
        except ValidationError as exc:
            self.logger.warning(f"Campo cpf com tipo inesperado: {exc.errors()}")
            return None

    def validate(self, body: bytes) -> Tuple[int, CpfResponse]:
        """
        Valida o CPF contido no corpo da requisição.
        Parâmetros:
            body (bytes): corpo HTTP bruto
        Retorno:
            (int, CpfResponse): status HTTP e envelope de resposta
        """
        self.logger.info("Iniciando a validação do CPF.")
        data = self.parse_payload(body)

        # cpf ausente, nulo ou vazio recebe a mesma resposta de corpo ausente
        if data is None or not data.cpf:
            self.logger.warning("Requisição inválida: corpo ou CPF ausente.")
            return 400, CpfResponse(success=False, message=MSG_AUSENTE, cpf=None)

        cpf = data.cpf
        self.logger.info(f"CPF recebido: {cpf}")

        if CPFUtils.is_valid_cpf(cpf):
            self.logger.info("CPF válido.")
            return 200, CpfResponse(success=True, message=MSG_VALIDO, cpf=cpf)

        self.logger.info("CPF inválido.")
        return 400, CpfResponse(success=False, message=MSG_INVALIDO, cpf=cpf)
