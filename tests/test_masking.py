import io
import logging

from regcreds.vault.masking import (
    ActionsSecretMasker,
    CompositeMasker,
    RedactingFilter,
    escape_command_data,
)


def test_actions_masker_writes_workflow_command():
    stream = io.StringIO()
    ActionsSecretMasker(stream).mask("s3cret")

    assert stream.getvalue() == "::add-mask::s3cret\n"


def test_actions_masker_splits_multiline_values():
    stream = io.StringIO()
    ActionsSecretMasker(stream).mask("line1\nline2\n")

    assert stream.getvalue() == "::add-mask::line1\n::add-mask::line2\n"


def test_actions_masker_escapes_command_data():
    stream = io.StringIO()
    masker = ActionsSecretMasker(stream)
    masker.mask("p%25w")
    masker.mask("100%")

    assert stream.getvalue() == "::add-mask::p%2525w\n::add-mask::100%25\n"


def test_escape_command_data():
    assert escape_command_data("a%b\r\nc") == "a%25b%0D%0Ac"
    assert escape_command_data("plain") == "plain"


def test_actions_masker_ignores_empty():
    stream = io.StringIO()
    ActionsSecretMasker(stream).mask("")

    assert stream.getvalue() == ""


def test_actions_masker_defaults_to_stdout(capsys):
    ActionsSecretMasker().mask("abc")

    assert capsys.readouterr().out == "::add-mask::abc\n"


def test_redacting_filter_scrubs_messages():
    redactor = RedactingFilter()
    redactor.mask("pass")
    redactor.mask("password123")
    redactor.mask("pass")

    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.addFilter(redactor)
    log = logging.getLogger("regcreds.test.redaction")
    log.addHandler(handler)
    log.propagate = False
    try:
        log.warning("token %s and %s", "password123", "pass")
    finally:
        log.removeHandler(handler)
        log.propagate = True

    assert stream.getvalue() == "token *** and ***\n"
    assert redactor.secret_count == 2


def test_redacting_filter_passes_through_without_secrets():
    redactor = RedactingFilter()
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello %s", ("world",), None)

    assert redactor.filter(record) is True
    assert record.getMessage() == "hello world"


def test_composite_masker_fans_out(masker):
    redactor = RedactingFilter()
    CompositeMasker(masker, redactor).mask("value")

    assert masker.masked == ["value"]
    assert redactor.redact("a value here") == "a *** here"
