"""Precise unit tests for exception hierarchy."""

from parley.dialogs.core import DialogsError, ProtocolContractViolation, TransportError
from parley.dialogs.models import DialogsNotModified


def test_transport_error_with_status_code():
    """Test TransportError keeps its status code."""
    error = TransportError("bad gateway", status_code=502)
    assert str(error) == "bad gateway"
    assert error.status_code == 502
    assert isinstance(error, DialogsError)


def test_protocol_contract_violation_keeps_payload():
    """Test ProtocolContractViolation carries the offending payload."""
    payload = DialogsNotModified(count=1)
    error = ProtocolContractViolation("not modified", payload=payload)
    assert error.payload is payload
    assert isinstance(error, DialogsError)
    assert not isinstance(error, TransportError)
