from typing import Optional

import pytest

from fieldguard import DEFAULT_ERROR_MESSAGES, BooleanSpec, ErrorKind, get_boolean_validator

REQUIRED = DEFAULT_ERROR_MESSAGES.render(ErrorKind.REQUIRED)


class TestBooleanValidator:
    @pytest.mark.parametrize(
        ["spec", "value", "expected"],
        [
            pytest.param(BooleanSpec(required=True), None, REQUIRED, id="required and absent"),
            pytest.param(BooleanSpec(required=True), False, REQUIRED, id="a required boolean must be affirmed"),
            pytest.param(BooleanSpec(required=True), True, False, id="required and affirmed"),
            pytest.param(BooleanSpec(), False, False, id="optional and false"),
            pytest.param(BooleanSpec(), None, False, id="optional and absent"),
        ],
    )
    def test_required(self, spec: BooleanSpec, value: Optional[bool], expected):
        assert get_boolean_validator()(spec, value) == expected

    def test_ignore_required(self):
        validate = get_boolean_validator(ignore_required_check=True)
        assert validate(BooleanSpec(required=True), False) is False

    def test_custom_required_message(self):
        validate = get_boolean_validator(customErrorMessages={"REQUIRED": "Please accept the terms"})
        assert validate(BooleanSpec(required=True)) == "Please accept the terms"
