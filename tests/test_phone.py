from pixcode.models.normalization import NormalizationStatus
from pixcode.phone import (
    digits_only,
    format_phone_br,
    normalize_phone,
    normalize_phone_detailed,
)


class TestDigitsOnly:
    def test_strips_formatting(self):
        assert digits_only("(11) 99999-9999") == "11999999999"

    def test_none(self):
        assert digits_only(None) == ""


class TestNormalizePhone:
    def test_formatted_mobile(self):
        assert normalize_phone("(11) 99999-9999") == "5511999999999"

    def test_national_mobile(self):
        assert normalize_phone("61999133181") == "5561999133181"

    def test_national_landline(self):
        assert normalize_phone("1133334444") == "551133334444"

    def test_already_normalized_is_unchanged(self):
        assert normalize_phone("5511999999999") == "5511999999999"

    def test_idempotent(self):
        once = normalize_phone("(61) 99913-3181")
        assert normalize_phone(once) == once

    def test_plus_prefix_is_ignored(self):
        assert normalize_phone("+55 61 99370-9608") == "5561993709608"

    def test_leading_trunk_zero_dropped(self):
        assert normalize_phone("011 99999-9999") == "5511999999999"

    def test_country_code_missing_mobile_nine(self):
        assert normalize_phone("55113333444") == "551193333444"

    def test_subscriber_only_gets_default_area_code(self):
        assert normalize_phone("99999-9999") == "5511999999999"

    def test_eight_digit_subscriber(self):
        assert normalize_phone("3333-4444") == "551133334444"

    def test_other_length_gets_country_code(self):
        assert normalize_phone("1234567") == "551234567"

    def test_no_digits(self):
        assert normalize_phone("abc") == ""

    def test_empty(self):
        assert normalize_phone("") == ""

    def test_only_zero(self):
        assert normalize_phone("0") == ""


class TestNormalizePhoneDetailed:
    def test_national_is_confident(self):
        result = normalize_phone_detailed("61999133181")
        assert result.status == NormalizationStatus.NORMALIZED
        assert result.rule == "national"

    def test_country_code_is_confident(self):
        result = normalize_phone_detailed("5511999999999")
        assert result.status == NormalizationStatus.NORMALIZED
        assert result.rule == "country_code"

    def test_default_area_code_is_ambiguous(self):
        result = normalize_phone_detailed("999999999")
        assert result.status == NormalizationStatus.AMBIGUOUS
        assert result.rule == "default_area_code"

    def test_custom_default_area_code(self):
        result = normalize_phone_detailed("999999999", default_area_code="61")
        assert result.value == "5561999999999"

    def test_inserted_mobile_nine_is_ambiguous(self):
        result = normalize_phone_detailed("55113333444")
        assert result.status == NormalizationStatus.AMBIGUOUS
        assert result.rule == "mobile_prefix"

    def test_unrecognized_length_is_ambiguous(self):
        result = normalize_phone_detailed("123")
        assert result.status == NormalizationStatus.AMBIGUOUS
        assert result.rule == "unrecognized_length"

    def test_empty_is_not_a_phone(self):
        result = normalize_phone_detailed("---")
        assert result.value == ""
        assert result.status == NormalizationStatus.NOT_A_PHONE


class TestFormatPhoneBr:
    def test_mobile(self):
        assert format_phone_br("11999999999") == "(11) 99999-9999"

    def test_landline(self):
        assert format_phone_br("1133334444") == "(11) 3333-4444"

    def test_other_returned_unchanged(self):
        assert format_phone_br("+5511999999999") == "+5511999999999"

