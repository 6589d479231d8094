from decimal import Decimal

import pytest
from pydantic import ValidationError as ModelValidationError

from pixcode.models.normalization import KeyNormalization, NormalizationStatus
from pixcode.models.payload import PixPayload
from pixcode.models.pix import Field, MerchantProfile, PaymentRequest, PixKey, PixKeyType


class TestPixKeyType:
    def test_values(self):
        assert {t.value for t in PixKeyType} == {"cpf", "cnpj", "email", "phone", "random"}

    def test_parse_canonical(self):
        assert PixKeyType.parse("email") is PixKeyType.EMAIL

    def test_parse_case_insensitive(self):
        assert PixKeyType.parse("  CNPJ ") is PixKeyType.CNPJ

    def test_parse_phone_aliases(self):
        for alias in ("celular", "telefone", "tel", "Phone"):
            assert PixKeyType.parse(alias) is PixKeyType.PHONE

    def test_parse_random_aliases(self):
        for alias in ("evp", "aleatoria", "Chave Aleatória"):
            assert PixKeyType.parse(alias) is PixKeyType.RANDOM

    def test_parse_unknown(self):
        assert PixKeyType.parse("boleto") is None

    def test_parse_empty(self):
        assert PixKeyType.parse("") is None
        assert PixKeyType.parse(None) is None


class TestMerchantProfile:
    def test_sanitized(self):
        profile = MerchantProfile(name="Pizzaria Dell'Ámore", city="Ribeirão Preto").sanitized()
        assert profile.name == "PIZZARIA DELLAMORE"
        assert profile.city == "RIBEIRAO PRETO"

    def test_defaults(self):
        profile = MerchantProfile().sanitized()
        assert profile.name == "ESTABELECIMENTO"
        assert profile.city == "SAO PAULO"

    def test_length_bounds(self):
        profile = MerchantProfile(name="N" * 40, city="C" * 40).sanitized()
        assert len(profile.name) == 25
        assert len(profile.city) == 15


class TestPaymentRequest:
    def test_defaults(self):
        request = PaymentRequest(key=PixKey(raw_value="a@b.com"))
        assert request.amount == Decimal("0")
        assert request.transaction_id == "***"
        assert request.merchant == MerchantProfile()
        assert request.key.declared_type is None

    def test_amount_coerced_to_decimal(self):
        request = PaymentRequest(key=PixKey(raw_value="a@b.com"), amount="12.5")
        assert request.amount == Decimal("12.5")


class TestField:
    def test_encode(self):
        assert Field(id="58", value="BR").encode() == "5802BR"

    @pytest.mark.parametrize("field_id", ["5", "580", "AB", ""])
    def test_id_must_be_two_digits(self, field_id):
        with pytest.raises(ModelValidationError):
            Field(id=field_id, value="BR")

    def test_value_at_most_99_chars(self):
        assert len(Field(id="59", value="A" * 99).value) == 99
        with pytest.raises(ModelValidationError):
            Field(id="59", value="A" * 100)


class TestKeyNormalization:
    def test_protocol_value_strips_plus(self):
        key = KeyNormalization(value="+5511999999999", status=NormalizationStatus.NORMALIZED)
        assert key.protocol_value == "5511999999999"
        assert key.is_phone

    def test_not_a_phone(self):
        key = KeyNormalization(value="a@b.com", status=NormalizationStatus.NOT_A_PHONE)
        assert key.protocol_value == "a@b.com"
        assert not key.is_phone


class TestPixPayload:
    def test_ambiguous(self):
        key = KeyNormalization(value="+5511999999999", status=NormalizationStatus.AMBIGUOUS)
        result = PixPayload(payload="x", key=key, merchant=MerchantProfile(), amount="0.00")
        assert result.ambiguous


class TestKeyTypeConflict:
    def test_type_conflict(self):
        key = KeyNormalization(
            value="+5512345678909",
            status=NormalizationStatus.NORMALIZED,
            declared_type=PixKeyType.CPF,
        )
        assert key.type_conflict

    def test_no_conflict_for_phone_or_unknown(self):
        for declared in (None, PixKeyType.PHONE):
            key = KeyNormalization(value="+5511999999999", status=NormalizationStatus.NORMALIZED, declared_type=declared)
            assert not key.type_conflict

    def test_no_conflict_for_non_phone(self):
        key = KeyNormalization(value="a@b.com", status=NormalizationStatus.NOT_A_PHONE, declared_type=PixKeyType.CPF)
        assert not key.type_conflict
