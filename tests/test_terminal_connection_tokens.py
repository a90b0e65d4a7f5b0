from payments_client.contracts import TerminalConnectionTokenParams


def test_new_connection_token(client, backend):
    token = client.terminal_connection_tokens.new(TerminalConnectionTokenParams())

    assert token is not None
    assert token.object == "terminal.connection_token"
    assert token.secret.startswith("pst_test_")
    assert backend.requests[-1].method == "POST"


def test_new_connection_token_for_location(client):
    token = client.terminal_connection_tokens.new(TerminalConnectionTokenParams(location="tml_123"))

    assert token.location == "tml_123"
