"""
Тесты для Conversion — построения BigInt и обратного преобразования

Проверяет:
1. from_integer: знак, разбиение на limbs, граница signed 64-bit
2. from_decimal_text: знак, ведущие нули, канонический ноль, ошибки разбора
3. to_decimal_text: заполнение нулями внутренних limbs
4. Обратимость int → BigInt → str → BigInt → int
"""

import pytest

from bignum import (
    BASE,
    BigInt,
    ParseError,
    from_decimal_text,
    from_integer,
    to_decimal_text,
    to_integer,
    zero,
)

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


# =============================================================================
# ТЕСТЫ from_integer
# =============================================================================


class TestFromInteger:
    """Тесты для from_integer"""

    def test_limbs_least_significant_first(self) -> None:
        """1002323809800980 → [809800980, 1002323]"""
        value = from_integer(1002323809800980)
        assert value.limbs == (809800980, 1002323)
        assert value.negative is False

    def test_negative(self) -> None:
        """Знак отделён от магнитуды"""
        value = from_integer(-1002323809800980)
        assert value.limbs == (809800980, 1002323)
        assert value.negative is True

    def test_zero_is_canonical(self) -> None:
        """from_integer(0) == zero()"""
        assert from_integer(0) == zero()
        assert from_integer(0).limbs == ()

    def test_exact_base_multiples(self) -> None:
        """Нулевые младшие limbs сохраняются"""
        assert from_integer(BASE).limbs == (0, 1)
        assert from_integer(BASE**2).limbs == (0, 0, 1)
        assert from_integer(BASE - 1).limbs == (BASE - 1,)

    def test_i64_min_boundary(self) -> None:
        """Минимальное signed 64-bit без переполнения"""
        value = from_integer(I64_MIN)
        assert value.negative is True
        assert value.limbs == (854775808, 223372036, 9)
        assert to_decimal_text(value) == "-9223372036854775808"

    def test_i64_max_boundary(self) -> None:
        value = from_integer(I64_MAX)
        assert to_decimal_text(value) == "9223372036854775807"

    def test_wider_than_i64(self) -> None:
        """int шире 64 бит также поддерживается"""
        value = from_integer(-(10**30) - 7)
        assert to_integer(value) == -(10**30) - 7

    def test_non_int_rejected(self) -> None:
        """float, str, bool → TypeError"""
        with pytest.raises(TypeError, match="expects int"):
            from_integer(1.0)  # type: ignore[arg-type]

        with pytest.raises(TypeError, match="expects int"):
            from_integer("1")  # type: ignore[arg-type]

        with pytest.raises(TypeError, match="expects int"):
            from_integer(True)


# =============================================================================
# ТЕСТЫ from_decimal_text
# =============================================================================


class TestFromDecimalText:
    """Тесты для from_decimal_text"""

    def test_simple(self) -> None:
        assert from_decimal_text("42") == from_integer(42)
        assert from_decimal_text("-42") == from_integer(-42)
        assert from_decimal_text("+42") == from_integer(42)

    def test_chunking_from_least_significant_end(self) -> None:
        """Группировка по 9 цифр с младшего конца"""
        value = from_decimal_text("1002323809800980")
        assert value.limbs == (809800980, 1002323)

        value = from_decimal_text("1000000000")
        assert value.limbs == (0, 1)

        value = from_decimal_text("123456789123456789")
        assert value.limbs == (123456789, 123456789)

    def test_leading_zeros_insignificant(self) -> None:
        """Ведущие нули не влияют на значение"""
        assert from_decimal_text("0000000000000000042") == from_integer(42)
        assert from_decimal_text("-000123") == from_integer(-123)

    def test_zero_forms_canonical(self) -> None:
        """"0", "-0", "+0", "000" → канонический ноль"""
        for text in ("0", "-0", "+0", "000", "-000000000000000000000"):
            value = from_decimal_text(text)
            assert value == zero()
            assert value.negative is False

    def test_empty_rejected(self) -> None:
        """Пустая строка"""
        with pytest.raises(ParseError, match="empty input"):
            from_decimal_text("")

    def test_sign_without_digits_rejected(self) -> None:
        """Знак без цифр"""
        for text in ("-", "+"):
            with pytest.raises(ParseError, match="sign without digits"):
                from_decimal_text(text)

    def test_non_digit_rejected(self) -> None:
        """Посторонние символы"""
        for text in ("12a3", " 12", "12 ", "1_000", "--1", "+-1", "1-", "1.0", "0x10"):
            with pytest.raises(ParseError, match="non-digit"):
                from_decimal_text(text)

    def test_non_ascii_digits_rejected(self) -> None:
        """Не-ASCII цифры отклоняются"""
        for text in ("١٢٣", "²", "１２"):
            with pytest.raises(ParseError):
                from_decimal_text(text)

    def test_parse_error_is_value_error(self) -> None:
        """ParseError совместим с ValueError и хранит контекст"""
        with pytest.raises(ValueError) as exc_info:
            from_decimal_text("12a3")

        assert isinstance(exc_info.value, ParseError)
        assert exc_info.value.text == "12a3"
        assert exc_info.value.reason == "non-digit character"

    def test_non_str_rejected(self) -> None:
        with pytest.raises(TypeError, match="expects str"):
            from_decimal_text(123)  # type: ignore[arg-type]


# =============================================================================
# ТЕСТЫ to_decimal_text / to_integer
# =============================================================================


class TestToDecimalText:
    """Тесты для to_decimal_text"""

    def test_zero(self) -> None:
        assert to_decimal_text(zero()) == "0"

    def test_inner_limbs_zero_padded(self) -> None:
        """Внутренние limbs дополняются нулями до 9 цифр"""
        assert to_decimal_text(BigInt(limbs=(7, 0, 1))) == "1000000000000000007"
        assert to_decimal_text(BigInt(limbs=(0, 1))) == "1000000000"

    def test_head_limb_unpadded(self) -> None:
        assert to_decimal_text(BigInt(limbs=(5,))) == "5"
        assert to_decimal_text(BigInt(limbs=(5,), negative=True)) == "-5"

    def test_concrete_case(self) -> None:
        assert to_decimal_text(from_integer(1002323809800980)) == "1002323809800980"


class TestRoundTrip:
    """int → BigInt → str → BigInt → int"""

    def test_round_trip(self) -> None:
        samples = [
            0,
            1,
            -1,
            BASE - 1,
            BASE,
            -BASE,
            BASE + 1,
            I64_MIN,
            I64_MAX,
            I64_MIN + 1,
            10**18,
            -(10**18) + 1,
            1002323809800980,
        ]
        for v in samples:
            value = from_integer(v)
            text = to_decimal_text(value)
            assert text == str(v)
            assert from_decimal_text(text) == value
            assert to_integer(value) == v
