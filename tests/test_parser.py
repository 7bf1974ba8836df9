from daikin_purifier.protocol.parser import decode_nested, encode_query, parse_response


def test_parse_simple_body():
    assert parse_response("a=1,b=2") == {"a": "1", "b": "2"}


def test_parse_drops_malformed_tokens():
    assert parse_response("a=1,bad,b=2") == {"a": "1", "b": "2"}
    # a value containing '=' splits into three parts and is discarded
    assert parse_response("a=1,b=x=y") == {"a": "1"}


def test_parse_empty_body():
    assert parse_response("") == {}


def test_parse_last_value_wins():
    assert parse_response("a=1,a=2") == {"a": "2"}


def test_parse_keeps_empty_values():
    assert parse_response("ret=OK,name=") == {"ret": "OK", "name": ""}


def test_decode_nested_percent_encoded():
    assert decode_nested("pow%3D1%2Cmode%3D0") == {"pow": "1", "mode": "0"}


def test_decode_nested_missing():
    assert decode_nested(None) == {}


def test_encode_query_keeps_order():
    assert encode_query({"pow": 1, "mode": "0", "airvol": 0}) == "pow=1&mode=0&airvol=0"
    assert encode_query({}) == ""
