"""
Testes Unitários para Result, Error e capacidades compartilhadas.

Coverage:
- Result.success / Result.fail / acesso indevido
- map / bind / unwrap_or
- Error factories e serialização
- FrozenClock / SequentialIdGenerator / is_empty_id
"""

from datetime import datetime, timedelta, timezone
import uuid

import pytest

from src.core.shared import (
    Error,
    ErrorType,
    FrozenClock,
    Result,
    ResultAccessError,
    SequentialIdGenerator,
    SystemClock,
    UUIDGenerator,
    is_empty_id,
)


class TestResult:
    """Testes para o wrapper Result."""

    def test_success_expoe_valor(self):
        result = Result.success(42)

        assert result.is_success
        assert not result.is_failure
        assert result.value == 42
        assert bool(result) is True

    def test_fail_expoe_erro(self):
        error = Error.not_found("Nada aqui")
        result = Result.fail(error)

        assert result.is_failure
        assert result.error is error
        assert bool(result) is False

    def test_valor_de_falha_lanca_result_access_error(self):
        """Ler value de uma falha é erro de programação."""
        result = Result.fail(Error.validation("Inválido", "name"))

        with pytest.raises(ResultAccessError) as exc_info:
            result.value

        assert exc_info.value.error.invalid_field == "name"
        assert exc_info.value.to_dict()["cause"]["field"] == "name"

    def test_erro_de_sucesso_lanca_result_access_error(self):
        with pytest.raises(ResultAccessError):
            Result.success("ok").error

    def test_fail_sem_erro_rejeitado(self):
        with pytest.raises(ValueError):
            Result.fail(None)

    def test_map_transforma_sucesso(self):
        assert Result.success(2).map(lambda v: v * 10).value == 20

    def test_map_preserva_falha(self):
        error = Error.failure("boom")
        mapped = Result.fail(error).map(lambda v: v * 10)

        assert mapped.error == error

    def test_bind_encadeia_operacoes(self):
        def metade(v):
            if v % 2:
                return Result.fail(Error.validation("Ímpar", "v"))
            return Result.success(v // 2)

        assert Result.success(8).bind(metade).value == 4
        assert Result.success(3).bind(metade).error.type is ErrorType.VALIDATION

    def test_unwrap_or(self):
        assert Result.success(1).unwrap_or(0) == 1
        assert Result.fail(Error.conflict("x")).unwrap_or(0) == 0

    def test_igualdade(self):
        assert Result.success("a") == Result.success("a")
        assert Result.success("a") != Result.success("b")


class TestError:
    """Testes para a taxonomia de erros."""

    def test_validation_com_campo(self):
        error = Error.validation("Nome curto", "name")

        assert error.type is ErrorType.VALIDATION
        assert error.invalid_field == "name"
        assert error.code == "VALIDATION_ERROR_NAME"
        assert error.to_dict() == {
            "error": "VALIDATION_ERROR_NAME",
            "type": "validation",
            "message": "Nome curto",
            "field": "name",
        }

    def test_not_found_sem_campo(self):
        error = Error.not_found("Sumiu")

        assert error.type is ErrorType.NOT_FOUND
        assert error.invalid_field is None
        assert "field" not in error.to_dict()
        assert str(error) == "[NOT_FOUND] Sumiu"

    @pytest.mark.parametrize("factory,expected", [
        (Error.failure, ErrorType.FAILURE),
        (Error.conflict, ErrorType.CONFLICT),
    ])
    def test_tipos_reservados(self, factory, expected):
        assert factory("msg").type is expected

    def test_none_nao_pode_ser_erro(self):
        """NONE é apenas sentinela de sucesso."""
        with pytest.raises(ValueError):
            Error(ErrorType.NONE, "nada")

    def test_error_imutavel(self):
        error = Error.not_found("x")

        with pytest.raises(AttributeError):
            error.message = "y"


class TestCapacidades:
    """Testes para Clock e IdGenerator."""

    def test_system_clock_retorna_utc(self):
        now = SystemClock().now()

        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)

    def test_frozen_clock_avanca_manualmente(self):
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        clock = FrozenClock(start)

        assert clock.now() == start
        assert clock.advance(timedelta(hours=1)) == start + timedelta(hours=1)
        assert clock.now() == start + timedelta(hours=1)

    def test_sequential_id_generator(self):
        generator = SequentialIdGenerator()

        assert generator.new_id() == uuid.UUID(int=1)
        assert generator.new_id() == uuid.UUID(int=2)

    def test_uuid_generator_gera_ids_distintos(self):
        generator = UUIDGenerator()

        assert generator.new_id() != generator.new_id()

    @pytest.mark.parametrize("value,expected", [
        (None, True),
        (uuid.UUID(int=0), True),
        ("", True),
        (uuid.UUID(int=7), False),
    ])
    def test_is_empty_id(self, value, expected):
        assert is_empty_id(value) is expected
