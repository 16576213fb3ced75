import pytest

from backend.jobboard.utils.error_handlers import ValidationError, get_error_message
from backend.jobboard.utils.validation import require_credentials


def test_values_pass_through_unchanged():
    assert require_credentials(" Alice ", "pw ") == (" Alice ", "pw ")


@pytest.mark.parametrize("username,password", [("", "pw"), ("alice", ""), (None, "pw"), ("alice", None)])
def test_missing_values_rejected(username, password):
    with pytest.raises(ValidationError) as exc_info:
        require_credentials(username, password)
    assert exc_info.value.message == get_error_message("missing_credentials")


def test_non_string_values_rejected():
    with pytest.raises(ValidationError) as exc_info:
        require_credentials(42, "pw")
    assert exc_info.value.message == get_error_message("validation_error")


def test_unknown_error_key_falls_back_to_server_error():
    assert get_error_message("no_such_key") == get_error_message("server_error")
