"""Tests for response unwrap rules."""

import pytest

from sabnzbd_client.domain.responses import UnwrapRule


class TestUnwrapRuleFieldPresent:
    @pytest.mark.parametrize(
        ("rule", "payload", "expected"),
        [
            (UnwrapRule.VERSION, {"version": "3.0.1"}, "3.0.1"),
            (UnwrapRule.QUEUE, {"queue": {"slots": []}}, {"slots": []}),
            (UnwrapRule.STATUS, {"status": True}, True),
            (UnwrapRule.FILES, {"files": [{"nzf_id": "f1"}]}, [{"nzf_id": "f1"}]),
            (UnwrapRule.NZO_IDS, {"status": True, "nzo_ids": ["n1"]}, ["n1"]),
        ],
    )
    def test_returns_expected_field(self, rule, payload, expected):
        assert rule.apply(payload) == expected

    def test_nzo_ids_falls_back_to_status(self):
        assert UnwrapRule.NZO_IDS.apply({"status": False, "error": "x"}) is False

    def test_null_field_is_still_present(self):
        assert UnwrapRule.VERSION.apply({"version": None}) is None


class TestUnwrapRuleFallback:
    def test_missing_field_returns_whole_body(self):
        payload = {"error": "API Key Incorrect"}
        assert UnwrapRule.QUEUE.apply(payload) is payload

    def test_status_false_is_not_converted(self):
        assert UnwrapRule.STATUS.apply({"status": False, "error": "nope"}) is False

    def test_raw_returns_body(self):
        payload = {"status": True, "history": {}}
        assert UnwrapRule.RAW.apply(payload) is payload

    @pytest.mark.parametrize("payload", [["a"], "text", 3, None])
    def test_non_dict_bodies_pass_through(self, payload):
        assert UnwrapRule.STATUS.apply(payload) == payload
