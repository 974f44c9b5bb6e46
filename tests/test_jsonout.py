import io
import json

from ocmadm.jsonout import HubInfo, write_json_output


def _dump(val):
    buf = io.StringIO()
    write_json_output(buf, val)
    return buf.getvalue()


def test_hub_info_round_trip():
    info = HubInfo(hub_token="token", hub_apiserver="https://hub.example.com:6443")
    text = _dump(info)
    assert json.loads(text) == {
        "hub-token": "token",
        "hub-apiserver": "https://hub.example.com:6443",
    }


def test_hub_info_keeps_field_order():
    text = _dump(HubInfo(hub_token="token", hub_apiserver="api"))
    assert text.index('"hub-token"') < text.index('"hub-apiserver"')


def test_output_is_indented_and_newline_terminated():
    text = _dump({"a": 1})
    assert text.endswith("}\n")
    lines = text.splitlines()
    assert lines[0] == "{"
    assert lines[1].startswith("  ")
    assert not lines[1].startswith("   ")


def test_map_keys_are_sorted():
    text = _dump({"b": 1, "a": 2, "c": 3})
    assert text.index('"a"') < text.index('"b"') < text.index('"c"')


def test_nested_round_trip():
    val = {"list": [1, 2, {"x": "y"}], "empty": {}, "none": None, "flag": True}
    assert json.loads(_dump(val)) == val


def test_html_characters_are_escaped():
    val = {"k": "<a & b>"}
    text = _dump(val)
    assert "<" not in text and ">" not in text and "&" not in text
    assert json.loads(text) == val


def test_non_ascii_kept():
    val = {"name": "héllo"}
    text = _dump(val)
    assert "héllo" in text
    assert json.loads(text) == val