from modules.number_stats.core.parse import (
    EmptyInput,
    ParseFailure,
    Parsed,
    TooManyNumbers,
    parse_numbers,
    split_tokens,
)


def test_empty_and_blank_input_is_not_an_error():
    assert parse_numbers("") == EmptyInput()
    assert parse_numbers("   ") == EmptyInput()
    assert parse_numbers(None) == EmptyInput()
    assert parse_numbers(" , ,\n\t") == EmptyInput()


def test_commas_and_whitespace_are_separators():
    assert split_tokens("1, 2,3\t4\n5") == ["1", "2", "3", "4", "5"]
    outcome = parse_numbers("1, 2,3\t4\n5")
    assert outcome == Parsed((1.0, 2.0, 3.0, 4.0, 5.0))


def test_keeps_input_order_and_duplicates():
    outcome = parse_numbers("3 1 3 2")
    assert isinstance(outcome, Parsed)
    assert outcome.numbers == (3.0, 1.0, 3.0, 2.0)


def test_accepts_signs_decimals_and_exponents():
    outcome = parse_numbers("-1.5 +2 .25 3. 1e3 -4.5E-2")
    assert outcome == Parsed((-1.5, 2.0, 0.25, 3.0, 1000.0, -0.045))


def test_first_invalid_token_fails_verbatim():
    outcome = parse_numbers("1 2 abc def")
    assert outcome == ParseFailure("abc")
    assert outcome.message == "'abc' is invalid"


def test_rejects_non_decimal_and_special_forms():
    for token in ["0x10", "inf", "nan", "1_000", "1e999", "-", ".", "1e", "1,5e", "١٢", "１２", "٣.5"]:
        outcome = parse_numbers(f"1 {token}")
        assert isinstance(outcome, ParseFailure), token


def test_ten_twenty_thirty():
    assert parse_numbers("10 20 thirty") == ParseFailure("thirty")


def test_item_limit():
    outcome = parse_numbers("1 2 3 4", max_items=3)
    assert outcome == TooManyNumbers(3)
    assert outcome.message == "Too many numbers (limit 3)."
    assert isinstance(parse_numbers("1 2 3", max_items=3), Parsed)
    assert isinstance(parse_numbers("1 2 3 4", max_items=None), Parsed)


def test_non_ascii_digits_fail_verbatim():
    assert parse_numbers("1 ١٢") == ParseFailure("١٢")
    assert parse_numbers("１２ 3") == ParseFailure("１２")


def test_module_and_core_are_regular_packages():
    import modules.number_stats
    import modules.number_stats.core

    assert modules.number_stats.__file__.endswith("__init__.py")
    assert modules.number_stats.core.__file__.endswith("__init__.py")
