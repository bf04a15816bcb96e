from typing import Optional
from pydantic import BaseModel, ConfigDict


class CpfRequest(BaseModel):
    """Corpo da requisição de validação. Campos extras são ignorados."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    cpf: Optional[str] = None


class CpfResponse(BaseModel):
    success: bool
    message: str
    cpf: Optional[str] = None
