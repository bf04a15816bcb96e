import streamlit as st
import httpx
import asyncio
import os
from typing import Optional

API_BASE = os.getenv("API_BASE", "http://api:3000")  # service name in docker network (docker compose network)
VALIDATE_URL = f"{API_BASE}/api/HttpValidaCpf"

st.set_page_config(page_title="Validação de CPF", page_icon="🪪", layout="centered")

# -------------- Helpers --------------
async def fetch_json(client: httpx.AsyncClient, method: str, url: str, **kwargs):
    try:
        resp = await client.request(method, url, timeout=10, **kwargs)
        if resp.headers.get("content-type", "").startswith("application/json"):
            data = resp.json()
        else:
            data = {"raw": resp.text}
        if resp.is_error:
            return False, data, resp.status_code
        return True, data, resp.status_code
    except httpx.HTTPError as e:
        return False, {"error": str(e)}, 0

async def validate_cpf(client, cpf: str, function_key: Optional[str] = None):
    headers = {"x-functions-key": function_key} if function_key else {}
    return await fetch_json(client, "POST", VALIDATE_URL, json={"cpf": cpf}, headers=headers)

# -------------- UI --------------
st.title("🪪 Validação de CPF")
st.caption("Interface simples em Streamlit para a API de validação")

async def main_ui():
    with st.sidebar:
        function_key = st.text_input("Chave de função (opcional)", type="password", key="function_key")

    with st.form("cpf_form", clear_on_submit=False):
        cpf = st.text_input("CPF", placeholder="111.444.777-35", key="cpf")
        submitted = st.form_submit_button("Validar", type="primary")

    if not submitted:
        st.stop()

    async with httpx.AsyncClient() as client:
        ok, data, status = await validate_cpf(client, cpf, function_key or None)

    if ok:
        st.success(f"{data.get('message')}: {data.get('cpf')}")
    elif status == 400:
        st.error(data.get("message") if isinstance(data, dict) else data)
    elif status == 401:
        st.error("Chave de função ausente ou inválida.")
    else:
        detail = data.get("error") if isinstance(data, dict) else data
        st.error(f"Erro ({status}): {detail}")
    with st.expander("Resposta bruta", expanded=False):
        st.json(data)

asyncio.run(main_ui())
