"""
Módulo utilitário para validação e normalização de CPF.
Funções puras, sem estado e sem I/O: podem ser chamadas em paralelo livremente.
"""
from typing import Optional, Sequence

PESOS_PRIMEIRO_DIGITO = (10, 9, 8, 7, 6, 5, 4, 3, 2)
PESOS_SEGUNDO_DIGITO = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)
TAMANHO_CPF = 11
DIGITOS = "0123456789"


class CPFUtils:
    @staticmethod
    def normalize_cpf(cpf: Optional[str]) -> str:
        """
        Remove a pontuação de formatação ('.' e '-') do CPF.
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            str: CPF sem pontos e traços ('' se ausente)
        Exemplo: '111.444.777-35' -> '11144477735'
        """
        if not cpf:
            return ""
        return cpf.replace(".", "").replace("-", "")

    @staticmethod
    def _digito_verificador(digitos: str, pesos: Sequence[int]) -> int:
        soma = sum(DIGITOS.index(d) * peso for d, peso in zip(digitos, pesos))
        resto = soma % 11
        return 0 if resto < 2 else 11 - resto

    @staticmethod
    def calculate_check_digits(base: str) -> str:
        """
        Calcula os dois dígitos verificadores para os 9 primeiros dígitos do CPF.
        Parâmetros:
            base (str): 9 dígitos decimais
        Retorno:
            str: sufixo esperado com 2 caracteres
        Exemplo: '123456789' -> '00'
        """
        primeiro = CPFUtils._digito_verificador(base, PESOS_PRIMEIRO_DIGITO)
        segundo = CPFUtils._digito_verificador(base + str(primeiro), PESOS_SEGUNDO_DIGITO)
        return f"{primeiro}{segundo}"

    @staticmethod
    def is_valid_cpf(cpf: Optional[str]) -> bool:
        """
        Valida CPF pelo algoritmo dos dígitos verificadores.
        Sequências de dígitos repetidos não são rejeitadas de antemão:
        valem apenas se a fórmula bater (ex.: '00000000000' é válido).
        Parâmetros:
            cpf (str): CPF com ou sem pontuação
        Retorno:
            bool: True se válido, False caso contrário (nunca lança exceção)
        """
        if not cpf or not isinstance(cpf, str):
            return False
        digitos = CPFUtils.normalize_cpf(cpf)
        if len(digitos) != TAMANHO_CPF:
            return False
        # Somente '0'-'9' ASCII; nada de int() no número inteiro (zeros à esquerda)
        if any(c not in DIGITOS for c in digitos):
            return False
        return digitos.endswith(CPFUtils.calculate_check_digits(digitos[:9]))
