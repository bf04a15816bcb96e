from typing import Dict, Optional
from fastapi import Depends, HTTPException, Query, status
from fastapi.security import APIKeyHeader
import logging
import os
import secrets

logger = logging.getLogger(__name__)

function_key_header = APIKeyHeader(name="x-functions-key", auto_error=False)


def read_keys_file(file_path: str) -> Dict[str, str]:
	"""
	Lê o arquivo de chaves (uma entrada 'nome:chave' por linha).
	Relido a cada requisição, então edições valem sem reiniciar a API.
	"""
	keys: Dict[str, str] = {}
	try:
		with open(file_path, "r", encoding="utf-8") as f:
			lines = [line.strip() for line in f]
	except FileNotFoundError:
		return keys
	for entry in lines:
		if entry.startswith("#") or ":" not in entry:
			continue
		name, key = (part.strip() for part in entry.split(":", 1))
		if key:
			keys[name] = key
	return keys


def configured_keys() -> Dict[str, str]:
	keys = read_keys_file(os.getenv("FUNCTION_KEYS_FILE", "backend/credentials/function_keys.txt"))
	single = os.getenv("FUNCTION_KEY")
	if single:
		keys["default"] = single
	return keys


async def function_key_auth(
	header_key: Optional[str] = Depends(function_key_header),
	code: Optional[str] = Query(default=None, include_in_schema=False),
) -> Optional[str]:
	"""Sem chaves configuradas o endpoint fica aberto; caso contrário exige uma chave válida."""
	keys = configured_keys()
	if not keys:
		return None
	supplied = header_key or code
	if supplied:
		for name, expected in keys.items():
			if secrets.compare_digest(expected.encode("utf-8"), supplied.encode("utf-8")):
				return name
	logger.warning("Requisição rejeitada: chave de função ausente ou inválida")
	raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Chave de função inválida")
