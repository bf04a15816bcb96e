import pytest
from backend.utils.cpf_utils import CPFUtils


def test_normalize_cpf_removes_dots_and_dashes():
    assert CPFUtils.normalize_cpf("111.444.777-35") == "11144477735"


def test_normalize_cpf_keeps_other_characters():
    assert CPFUtils.normalize_cpf("111 444/777") == "111 444/777"


@pytest.mark.parametrize("cpf", [None, ""])
def test_normalize_cpf_empty(cpf):
    assert CPFUtils.normalize_cpf(cpf) == ""


def test_calculate_check_digits_reference():
    # 210 % 11 == 1 nas duas etapas -> "00"
    assert CPFUtils.calculate_check_digits("123456789") == "00"
    assert CPFUtils.calculate_check_digits("111444777") == "35"
    assert CPFUtils.calculate_check_digits("012345678") == "90"


@pytest.mark.parametrize("cpf", [
    "111.444.777-35",
    "11144477735",
    "12345678900",
    "097.024.144-58",
    "01234567890",
])
def test_is_valid_cpf_valid(cpf):
    assert CPFUtils.is_valid_cpf(cpf) is True


def test_is_valid_cpf_wrong_check_digits():
    assert CPFUtils.is_valid_cpf("111.444.777-36") is False
    assert CPFUtils.is_valid_cpf("11144477753") is False


@pytest.mark.parametrize("cpf", ["00000000000", "11111111111", "222.222.222-22"])
def test_is_valid_cpf_repeated_digits_follow_formula(cpf):
    assert CPFUtils.is_valid_cpf(cpf) is True


@pytest.mark.parametrize("cpf", [
    None,
    "",
    "...-",
    "1114447773",
    "111444777355",
    "111.444.777-3",
    "111 444 777 35",
    "1114447773a",
    "+1144477735",
    " 1144477735",
    "١١١٤٤٤٧٧٧٣٥",
])
def test_is_valid_cpf_malformed(cpf):
    assert CPFUtils.is_valid_cpf(cpf) is False


def test_is_valid_cpf_non_string_does_not_raise():
    assert CPFUtils.is_valid_cpf(11144477735) is False


def test_is_valid_cpf_is_idempotent():
    results = {CPFUtils.is_valid_cpf("111.444.777-35") for _ in range(5)}
    assert results == {True}
