"""Unit tests for division question generation."""

from generation import DivisionGenerator
from models import Category


class TestIntegerDivision:
    """Tests for the integer path."""

    def test_dividend_built_from_divisor_and_quotient(self, scripted_rng, integer_settings):
        card = DivisionGenerator(scripted_rng([4, 2])).generate(integer_settings)

        assert card.category == Category.DIVISION
        assert card.question == "8 ÷ 4 = ?"
        assert card.natural_question == "What is 8 divided by 4?"
        assert card.correct_answer == "2"
        assert sorted(card.options, key=int) == ["1", "2", "3", "4"]

    def test_division_is_always_exact(self, integer_settings):
        generator = DivisionGenerator()
        for _ in range(300):
            card = generator.generate(integer_settings)
            dividend, divisor = (int(part) for part in card.question[:-4].split(" ÷ "))
            assert 1 <= dividend <= 10
            assert dividend % divisor == 0
            assert card.correct_answer == str(dividend // divisor)

    def test_independent_signs(self, scripted_rng, signed_integer_settings):
        # |divisor| = 3, |quotient| = 2, divisor negative, quotient positive
        card = DivisionGenerator(scripted_rng([3, 2, 1, 0])).generate(
            signed_integer_settings
        )
        assert card.question == "(-6) ÷ (-3) = ?"
        assert card.correct_answer == "2"

    def test_signed_dividend_within_cap(self, signed_integer_settings):
        generator = DivisionGenerator()
        for _ in range(300):
            card = generator.generate(signed_integer_settings)
            dividend = int(card.question.split(" ÷ ")[0].strip("()"))
            assert -10 <= dividend <= 10


class TestDecimalDivision:
    """Tests for the tenths-by-integer path."""

    def test_tenths_quotient(self, scripted_rng, decimal_settings):
        card = DivisionGenerator(scripted_rng([4, 25])).generate(decimal_settings)

        assert card.question == "10.0 ÷ 4 = ?"
        assert card.natural_question == "What is 10.0 divided by 4?"
        assert card.correct_answer == "2.5"

    def test_signed_tenths_quotient(self, scripted_rng, signed_decimal_settings):
        card = DivisionGenerator(scripted_rng([2, 7, 0, 1])).generate(
            signed_decimal_settings
        )
        assert card.question == "(-1.4) ÷ 2 = ?"
        assert card.correct_answer == "-0.7"

    def test_negative_divisor_parenthesized_in_sentence(
        self, scripted_rng, signed_decimal_settings
    ):
        card = DivisionGenerator(scripted_rng([2, 7, 1, 1])).generate(
            signed_decimal_settings
        )

        assert card.question == "1.4 ÷ (-2) = ?"
        assert card.natural_question == "What is 1.4 divided by (-2)?"
        assert card.correct_answer == "-0.7"

    def test_divisor_is_a_whole_number(self, decimal_settings):
        generator = DivisionGenerator()
        for _ in range(100):
            card = generator.generate(decimal_settings)
            dividend, divisor = card.question[:-4].split(" ÷ ")
            assert "." in dividend
            assert divisor.isdigit()
