import logging

from fieldguard import DEFAULT_ERROR_MESSAGES, ErrorKind, NumberSpec, StringSpec, get_number_validator
from fieldguard.logging import logger, use_logger
from fieldguard.validation.core import Check, CheckSequence


def _always(spec, value) -> bool:
    return True


class TestCheckSequence:
    def test_ignored_checks_are_dropped(self):
        checks = CheckSequence.build(
            DEFAULT_ERROR_MESSAGES,
            [
                (True, Check(name="first", kind=ErrorKind.REQUIRED, violated=_always)),
                (False, Check(name="second", kind=ErrorKind.INVALID, violated=_always)),
            ],
        )
        assert checks.names == ["second"]
        assert checks.run(StringSpec(), "x") == DEFAULT_ERROR_MESSAGES.render(ErrorKind.INVALID)

    def test_first_violation_wins(self):
        evaluated: list[str] = []

        def record(name: str, result: bool):
            def violated(spec, value) -> bool:
                evaluated.append(name)
                return result

            return violated

        checks = CheckSequence.build(
            DEFAULT_ERROR_MESSAGES,
            [
                (False, Check(name="passes", kind=ErrorKind.REQUIRED, violated=record("passes", False))),
                (False, Check(name="fails", kind=ErrorKind.NUMBER, violated=record("fails", True))),
                (False, Check(name="never", kind=ErrorKind.INT, violated=record("never", True))),
            ],
        )
        assert checks.run(NumberSpec(), "x") == DEFAULT_ERROR_MESSAGES.render(ErrorKind.NUMBER)
        assert evaluated == ["passes", "fails"]

    def test_message_override(self):
        check = Check(
            name="pattern",
            kind=ErrorKind.INVALID,
            violated=_always,
            message_override=lambda spec, value: spec.pattern_error,
        )
        checks = CheckSequence.build(DEFAULT_ERROR_MESSAGES, [(False, check)])
        assert checks.run(StringSpec(pattern_error="custom"), "x") == "custom"
        assert checks.run(StringSpec(), "x") == DEFAULT_ERROR_MESSAGES.render(ErrorKind.INVALID)

    def test_failed_check_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, "fieldguard-tests")
        validate = get_number_validator()
        assert validate(NumberSpec(maximum=1), "2")
        assert "Created number validator with checks" in caplog.messages[0]
        assert caplog.messages[-1] == "Check maximum failed: The value must not be greater than 1"

    def test_logs_go_to_the_logger_of_the_block(self, caplog):
        caplog.set_level(logging.DEBUG, "fieldguard-form")
        tests_logger = logger.get()
        validate = get_number_validator()
        with use_logger(logging.getLogger("fieldguard-form")) as form_logger:
            assert logger.get() is form_logger
            assert validate(NumberSpec(minimum=5), "2")
        assert logger.get() is tests_logger
        assert [record.name for record in caplog.records] == ["fieldguard-form"]
        assert caplog.messages == ["Check minimum failed: The value must not be less than 5"]

    def test_nested_blocks_restore_the_outer_logger(self):
        outer = logging.getLogger("fieldguard-outer")
        with use_logger(outer):
            with use_logger(logging.getLogger("fieldguard-inner")):
                assert logger.get().name == "fieldguard-inner"
            assert logger.get() is outer
