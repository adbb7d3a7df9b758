import structlog

from rubies.errors import (
    EXIT_FAILURE,
    EXIT_USAGE,
    ResolutionError,
    RubiesError,
    UsageError,
    log_error,
)


def test_resolution_error_details():
    error = ResolutionError("failed", command="/r/bin/ruby", returncode=2, output="oops")

    assert isinstance(error, RubiesError)
    assert error.exit_code == EXIT_FAILURE
    assert error.to_dict() == {
        "error": "ResolutionError",
        "message": "failed",
        "details": {"command": "/r/bin/ruby", "returncode": 2, "output": "oops"},
    }


def test_usage_error_exit_code():
    error = UsageError("no subcommand")

    assert error.exit_code == EXIT_USAGE
    assert error.details == {}


def test_log_error_includes_context():
    """Test structured error data is logged"""
    with structlog.testing.capture_logs() as logs:
        log_error(
            ResolutionError("failed", command="ruby", returncode=1),
            context={"argv": ["deactivate"]},
        )

    assert len(logs) == 1
    event = logs[0]["event"]
    assert logs[0]["log_level"] == "error"
    assert event["error_type"] == "ResolutionError"
    assert event["exit_code"] == EXIT_FAILURE
    assert event["context"] == {"argv": ["deactivate"]}
    assert event["details"]["command"] == "ruby"


def test_log_error_plain_exception():
    with structlog.testing.capture_logs() as logs:
        log_error(ValueError("bad"))

    assert logs[0]["event"] == {
        "event": "rubies_error",
        "error_type": "ValueError",
        "error_message": "bad",
    }
