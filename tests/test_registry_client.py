"""Tests for the trust-registry client and shared HTTP helper."""

from unittest.mock import patch

import pytest
import requests

from common.errors import RegistryError, RegistryTimeoutError
from common.http_client import get_json
from constants import Constants
from registry.skills import fetch_skills, normalize_payload, skills_endpoint


class TestNormalizePayload:
    """Test tolerant unwrapping of the response envelope."""

    def test_bare_list(self):
        assert normalize_payload([{"slug": "a"}]) == [{"slug": "a"}]

    def test_skills_envelope(self):
        assert normalize_payload({"skills": [{"slug": "a"}], "data": [{"slug": "b"}]}) == [{"slug": "a"}]

    def test_data_envelope(self):
        assert normalize_payload({"data": [{"slug": "b"}]}) == [{"slug": "b"}]

    def test_empty_skills_list_is_used_as_is(self):
        assert normalize_payload({"skills": [], "data": [{"slug": "b"}]}) == []

    def test_null_skills_falls_back_to_data(self):
        assert normalize_payload({"skills": None, "data": [{"slug": "b"}]}) == [{"slug": "b"}]

    def test_unknown_shapes_yield_empty(self):
        assert normalize_payload({"items": [{"slug": "a"}]}) == []
        assert normalize_payload({"skills": "nope"}) == []
        assert normalize_payload("text") == []
        assert normalize_payload(None) == []

    def test_non_object_records_dropped(self):
        assert normalize_payload([{"slug": "a"}, "junk", 3]) == [{"slug": "a"}]


class TestFetchSkills:
    """Test the single registry fetch."""

    def test_endpoint_strips_trailing_slash(self):
        assert skills_endpoint("https://r.test/") == "https://r.test/api/skills"

    @patch("common.http_client.requests.get")
    def test_fetch_builds_entries(self, mock_get, make_response):
        mock_get.return_value = make_response(
            200, {"skills": [{"slug": "a", "rating": "safe"}, {"slug": "b", "risk_level": "unsafe"}]}
        )

        entries = fetch_skills("https://r.test")

        assert [e.slug for e in entries] == ["a", "b"]
        assert [e.rating_value for e in entries] == ["safe", "unsafe"]
        assert mock_get.call_count == 1
        args, kwargs = mock_get.call_args
        assert args[0] == "https://r.test/api/skills"
        assert kwargs["timeout"] == Constants.REQUEST_TIMEOUT
        assert kwargs["allow_redirects"] is True
        assert kwargs["headers"]["Accept"] == "application/json"

    @patch("common.http_client.requests.get")
    def test_non_200_raises_with_status_and_body(self, mock_get, make_response):
        mock_get.return_value = make_response(503, text="maintenance")

        with pytest.raises(RegistryError) as excinfo:
            fetch_skills("https://r.test")

        assert excinfo.value.status_code == 503
        assert excinfo.value.body == "maintenance"
        assert str(excinfo.value) == "HTTP 503: maintenance"

    @patch("common.http_client.requests.get")
    def test_bad_json_raises(self, mock_get, make_response):
        mock_get.return_value = make_response(200, text="<html>bad</html>")

        with pytest.raises(RegistryError, match="JSON parse error"):
            fetch_skills("https://r.test")


class TestGetJsonTransportErrors:
    """Test translation of requests exceptions."""

    @patch("common.http_client.requests.get", side_effect=requests.Timeout("slow"))
    def test_timeout(self, _mock_get):
        with pytest.raises(RegistryTimeoutError, match=r"^Request timeout$"):
            get_json("https://r.test/api/skills", context="AgentAudit")

    @patch("common.http_client.requests.get", side_effect=requests.ConnectionError("refused"))
    def test_connection_error(self, _mock_get):
        with pytest.raises(RegistryError, match="AgentAudit connection error: refused"):
            get_json("https://r.test/api/skills", context="AgentAudit")
