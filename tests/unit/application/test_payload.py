"""Unit tests for gateway payload translation."""
from __future__ import annotations

import pytest

from mp_push.application.notifications import GatewayPayload, generate_payload


class TestBadge:
    def test_increment_sentinel(self):
        assert generate_payload({"badge": "Increment"}).notification["badge"] == "+1"

    def test_sentinel_is_case_sensitive(self):
        assert generate_payload({"badge": "increment"}).notification["badge"] == "increment"

    def test_number_is_stringified(self):
        assert generate_payload({"badge": 3}).notification["badge"] == "3"

    def test_zero_is_kept(self):
        assert generate_payload({"badge": 0}).notification["badge"] == "0"

    def test_integral_float(self):
        assert generate_payload({"badge": 4.0}).notification["badge"] == "4"

    def test_none_is_omitted(self):
        assert "badge" not in generate_payload({"badge": None}).notification


class TestNotificationFields:
    def test_alert_becomes_body(self):
        assert generate_payload({"alert": "A"}).notification == {"body": "A"}

    def test_body_overwrites_alert(self):
        assert generate_payload({"alert": "A", "body": "B"}).notification["body"] == "B"

    def test_body_overwrites_alert_regardless_of_key_order(self):
        assert generate_payload({"body": "B", "alert": "A"}).notification["body"] == "B"

    def test_uri_becomes_link(self):
        assert generate_payload({"uri": "https://example.com/x"}).notification == {
            "link": "https://example.com/x"
        }

    def test_display_fields(self):
        payload = generate_payload(
            {"title": "T", "sound": "default", "icon": "ic_bell", "color": "#ff0000"}
        )
        assert payload.notification == {
            "title": "T",
            "sound": "default",
            "icon": "ic_bell",
            "color": "#ff0000",
        }

    def test_empty_strings_are_omitted(self):
        assert generate_payload({"title": "", "alert": ""}).notification == {}

    def test_topic_goes_top_level(self):
        payload = generate_payload({"topic": "com.example.app", "alert": "hi"})
        assert payload.topic == "com.example.app"
        assert "topic" not in payload.notification
        assert payload.to_dict() == {"notification": {"body": "hi"}, "topic": "com.example.app"}


class TestCustomData:
    def test_custom_keys_only(self):
        payload = generate_payload({"foo": 1, "bar": 2})
        assert payload.data == {"foo": 1, "bar": 2}
        assert payload.notification == {}

    def test_well_known_keys_excluded(self):
        payload = generate_payload({"alert": "A", "badge": 1, "orderId": "o-1"})
        assert payload.data == {"orderId": "o-1"}

    def test_option_keys_travel_as_data(self):
        payload = generate_payload({"content-available": 1, "collapseKey": "news"})
        assert payload.data == {"content-available": 1, "collapseKey": "news"}

    def test_values_pass_through_verbatim(self):
        nested = {"a": [1, 2]}
        assert generate_payload({"meta": nested}).data["meta"] is nested

    def test_no_data_key_when_empty(self):
        payload = generate_payload({"alert": "A"})
        assert payload.data is None
        assert "data" not in payload.to_dict()


class TestEmptyInput:
    @pytest.mark.parametrize("data", [None, {}])
    def test_empty(self, data):
        payload = generate_payload(data)
        assert payload == GatewayPayload()
        assert payload.to_dict() == {"notification": {}}
