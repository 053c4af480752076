"""Tests for lightbot.program.tokens."""

from __future__ import annotations

import pytest

from lightbot.errors import MalformedProgramError
from lightbot.program.tokens import (
    find_scope_end,
    iter_call_names,
    keyword,
    normalize,
    parse_repeat_count,
    parse_signature,
    validate_nesting,
)


class TestKeyword:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("REPEAT 3", "REPEAT"),
            ("ENDREPEAT", "ENDREPEAT"),
            ("CALL F(1, 2)", "CALL"),
            ("FUNCTION(a)", "FUNCTION"),
            ("LEFT", "LEFT"),
            ("left", ""),
            ("", ""),
        ],
    )
    def test_leading_word(self, token: str, expected: str) -> None:
        assert keyword(token) == expected

    def test_normalize_strips_whitespace(self) -> None:
        assert normalize(["  LEFT", "REPEAT 2 \t", "ENDREPEAT"]) == (
            "LEFT",
            "REPEAT 2",
            "ENDREPEAT",
        )


class TestFindScopeEnd:
    def test_flat_scope(self) -> None:
        program = ["REPEAT 2", "FORWARD", "ENDREPEAT", "LIGHT"]
        assert find_scope_end(program, 0, "REPEAT") == 2

    def test_nested_scope_balances_levels(self) -> None:
        program = ["REPEAT 2", "REPEAT 3", "LEFT", "ENDREPEAT", "FORWARD", "ENDREPEAT"]
        assert find_scope_end(program, 0, "REPEAT") == 5
        assert find_scope_end(program, 1, "REPEAT") == 3

    def test_function_scope_ignores_repeat_closers(self) -> None:
        program = ["FUNCTION F", "REPEAT 2", "LIGHT", "ENDREPEAT", "ENDFUNCTION"]
        assert find_scope_end(program, 0, "FUNCTION") == 4

    def test_unclosed_scope_runs_to_end(self) -> None:
        program = ["REPEAT 2", "FORWARD"]
        assert find_scope_end(program, 0, "REPEAT") == 2


class TestValidateNesting:
    def test_well_formed_program_passes(self) -> None:
        validate_nesting(
            [
                "FUNCTION F(a)",
                "REPEAT a",
                "LIGHT",
                "ENDREPEAT",
                "ENDFUNCTION",
                "REPEAT 2",
                "CALL F(3)",
                "ENDREPEAT",
            ]
        )

    def test_stray_closer(self) -> None:
        with pytest.raises(MalformedProgramError, match="ENDREPEAT without matching REPEAT"):
            validate_nesting(["FORWARD", "ENDREPEAT"])

    def test_interleaved_scopes(self) -> None:
        with pytest.raises(MalformedProgramError, match="ENDREPEAT closes FUNCTION") as info:
            validate_nesting(["REPEAT 2", "FUNCTION F", "ENDREPEAT", "ENDFUNCTION"])
        assert info.value.index == 2

    def test_unclosed_opener(self) -> None:
        with pytest.raises(MalformedProgramError, match="FUNCTION is never closed") as info:
            validate_nesting(["LEFT", "FUNCTION F", "LIGHT"])
        assert info.value.index == 1


class TestParseSignature:
    def test_parameters_are_trimmed(self) -> None:
        assert parse_signature("FUNCTION F( a , b )", "FUNCTION") == ("F", ("a", "b"))

    @pytest.mark.parametrize("token", ["FUNCTION F", "FUNCTION F()", "FUNCTION F (  )"])
    def test_no_parameters(self, token: str) -> None:
        assert parse_signature(token, "FUNCTION") == ("F", ())

    def test_call_arguments(self) -> None:
        assert parse_signature("CALL draw(3, 1)", "CALL") == ("draw", ("3", "1"))

    def test_missing_name(self) -> None:
        with pytest.raises(MalformedProgramError, match="Missing name"):
            parse_signature("FUNCTION (a)", "FUNCTION")

    @pytest.mark.parametrize("token,kw", [("CALL F(1", "CALL"), ("FUNCTION F(a", "FUNCTION")])
    def test_unclosed_parameter_list(self, token: str, kw: str) -> None:
        with pytest.raises(MalformedProgramError, match="Unclosed parameter list"):
            parse_signature(token, kw)


class TestParseRepeatCount:
    def test_integer_count(self) -> None:
        assert parse_repeat_count("REPEAT 12") == 12

    def test_non_integer_count(self) -> None:
        with pytest.raises(MalformedProgramError, match="must be an integer") as info:
            parse_repeat_count("REPEAT n", index=4)
        assert info.value.index == 4

    @pytest.mark.parametrize("token", ["REPEAT", "REPEAT 1 2"])
    def test_wrong_operand_count(self, token: str) -> None:
        with pytest.raises(MalformedProgramError, match="one count operand"):
            parse_repeat_count(token)


def test_iter_call_names_skips_function_bodies() -> None:
    program = [
        "CALL A",
        "FUNCTION A",
        "CALL B",
        "ENDFUNCTION",
        "REPEAT 2",
        "CALL C(1)",
        "ENDREPEAT",
    ]
    assert list(iter_call_names(program)) == ["A", "C"]


def test_iter_call_names_skips_zero_and_negative_repeats() -> None:
    program = [
        "REPEAT 0",
        "CALL A",
        "ENDREPEAT",
        "REPEAT -1",
        "CALL B",
        "ENDREPEAT",
        "REPEAT 2",
        "CALL C",
        "ENDREPEAT",
        "REPEAT k",
        "CALL D",
        "ENDREPEAT",
    ]
    assert list(iter_call_names(program)) == ["C", "D"]
