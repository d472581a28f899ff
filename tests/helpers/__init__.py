from .mocks import MockResponse, mock_session, rpc_error, rpc_result, sent_payload
from .parity import assert_hex_equal

__all__ = [
    "MockResponse",
    "mock_session",
    "rpc_error",
    "rpc_result",
    "sent_payload",
    "assert_hex_equal",
]
