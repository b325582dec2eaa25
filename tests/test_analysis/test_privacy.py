"""Tests for private data expansion."""

from __future__ import annotations

import json

import pytest

from haricot.analysis.privacy import (
    PRIVATE_DATA_PATHS,
    decode_private_value,
    expand_private_data,
    render_json,
)
from haricot.errors import ExpansionError

ENCODED = "%7B%22k%22%3A1%7D"  # {"k":1}


class TestExpandPrivateData:
    """Tests for expand_private_data()."""

    def test_add_device_path(self) -> None:
        """Test AddDevice.DevicePrivateData is expanded."""
        text = json.dumps({"AddDevice": {"DevicePrivateData": ENCODED}})
        assert expand_private_data(text) == {"AddDevice": {"DevicePrivateData": {"k": 1}}}

    def test_resource_device_path(self) -> None:
        """Test Resource.Device.DevicePrivateData is expanded."""
        text = json.dumps({"Resource": {"Device": {"DevicePrivateData": ENCODED, "Id": 7}}})
        assert expand_private_data(text) == {"Resource": {"Device": {"DevicePrivateData": {"k": 1}, "Id": 7}}}

    def test_first_path_wins(self) -> None:
        """Test the second path is not consulted when the first matches."""
        text = json.dumps(
            {
                "AddDevice": {"DevicePrivateData": ENCODED},
                "Resource": {"Device": {"DevicePrivateData": "%7Bnot json"}},
            }
        )
        result = expand_private_data(text)

        assert result["AddDevice"]["DevicePrivateData"] == {"k": 1}
        assert result["Resource"]["Device"]["DevicePrivateData"] == "%7Bnot json"

    def test_null_first_path_falls_through(self) -> None:
        """Test a null value at the first path counts as absent."""
        text = json.dumps(
            {
                "AddDevice": {"DevicePrivateData": None},
                "Resource": {"Device": {"DevicePrivateData": ENCODED}},
            }
        )
        result = expand_private_data(text)

        assert result["AddDevice"]["DevicePrivateData"] is None
        assert result["Resource"]["Device"]["DevicePrivateData"] == {"k": 1}

    @pytest.mark.parametrize(
        "body",
        [
            {"Other": 1},
            {"AddDevice": "not an object"},
            {"AddDevice": {"DevicePrivateData": None}},
            {"Resource": {"Device": []}},
            [1, 2, 3],
            "just a string",
            None,
        ],
        ids=["unrelated", "parent_not_object", "null", "device_is_array", "array_root", "string_root", "null_root"],
    )
    def test_no_private_data(self, body) -> None:
        """Test documents without private data are returned unchanged."""
        assert expand_private_data(json.dumps(body)) == body

    def test_structured_value_left_alone(self) -> None:
        """Test a non-string private data value is kept as-is."""
        body = {"AddDevice": {"DevicePrivateData": {"already": "json"}}}
        assert expand_private_data(json.dumps(body)) == body

    def test_nested_value_is_structured(self) -> None:
        """Test the expanded value is a JSON structure, not text."""
        encoded = "%7B%22list%22%3A%5B1%2C2%5D%2C%22name%22%3A%22caf%C3%A9%22%7D"
        result = expand_private_data(json.dumps({"AddDevice": {"DevicePrivateData": encoded}}))
        assert result["AddDevice"]["DevicePrivateData"] == {"list": [1, 2], "name": "café"}

    def test_plus_is_not_space(self) -> None:
        """Test '+' survives percent-decoding unchanged."""
        encoded = "%7B%22a%22%3A%22x+y%22%7D"
        result = expand_private_data(json.dumps({"AddDevice": {"DevicePrivateData": encoded}}))
        assert result["AddDevice"]["DevicePrivateData"] == {"a": "x+y"}

    def test_body_not_json(self) -> None:
        """Test a non-JSON body is an ExpansionError."""
        with pytest.raises(ExpansionError, match="body is not valid JSON"):
            expand_private_data("<html></html>")

    def test_nested_not_json(self) -> None:
        """Test invalid nested JSON is an ExpansionError naming the path."""
        text = json.dumps({"Resource": {"Device": {"DevicePrivateData": "%7Bbroken"}}})

        with pytest.raises(ExpansionError, match="invalid nested JSON") as exc_info:
            expand_private_data(text)

        assert exc_info.value.path == "Resource.Device.DevicePrivateData"

    def test_nested_not_utf8(self) -> None:
        """Test percent-decoded bytes that are not UTF-8 are an ExpansionError."""
        text = json.dumps({"AddDevice": {"DevicePrivateData": "%FF%FE"}})

        with pytest.raises(ExpansionError, match="UTF-8"):
            expand_private_data(text)

    @pytest.mark.parametrize(
        "body",
        ['{"t": NaN}', '{"t": Infinity}', '{"t": -Infinity}'],
        ids=["nan", "infinity", "negative_infinity"],
    )
    def test_body_non_json_constant(self, body: str) -> None:
        """Test NaN and Infinity in the body are rejected."""
        with pytest.raises(ExpansionError, match="body is not valid JSON"):
            expand_private_data(body)

    def test_nested_non_json_constant(self) -> None:
        """Test NaN inside the private data is rejected with its path."""
        text = json.dumps({"AddDevice": {"DevicePrivateData": "%7B%22k%22%3ANaN%7D"}})

        with pytest.raises(ExpansionError, match="NaN") as exc_info:
            expand_private_data(text)

        assert exc_info.value.path == "AddDevice.DevicePrivateData"

    def test_body_lone_surrogate(self) -> None:
        """Test a body string escape that is not valid Unicode is rejected."""
        text = '{"Note": "\\ud800"}'

        with pytest.raises(ExpansionError, match="lone surrogate") as exc_info:
            expand_private_data(text)

        assert exc_info.value.path == "Note"

    def test_nested_lone_surrogate(self) -> None:
        """Test private data decoding to a lone surrogate is rejected with its path."""
        text = json.dumps({"AddDevice": {"DevicePrivateData": "%7B%22k%22%3A%22%5Cud800%22%7D"}})

        with pytest.raises(ExpansionError, match="lone surrogate") as exc_info:
            expand_private_data(text)

        assert exc_info.value.path == "AddDevice.DevicePrivateData.k"

    def test_search_order(self) -> None:
        """Test the known paths are searched in a fixed order."""
        assert PRIVATE_DATA_PATHS == (
            ("AddDevice", "DevicePrivateData"),
            ("Resource", "Device", "DevicePrivateData"),
        )


class TestHelpers:
    """Tests for decoding and rendering helpers."""

    def test_decode_private_value(self) -> None:
        """Test percent-decoding followed by JSON parsing."""
        assert decode_private_value("%5B1%2C%20true%5D") == [1, True]

    def test_decode_plain_json(self) -> None:
        """Test unencoded JSON passes through percent-decoding."""
        assert decode_private_value('{"k": 2}') == {"k": 2}

    def test_render_json(self) -> None:
        """Test rendering is indented and keeps non-ASCII characters."""
        assert render_json({"a": {"b": "é"}}) == '{\n  "a": {\n    "b": "é"\n  }\n}'
