"""Tests for the proxy data source client."""

import pytest
import requests

from capsules.client import CapsuleClient, FetchError, page_offset, parse_capsules
from capsules.schema import Capsule
from capsules.utils import format_launch_date



class TestOffsets:
    def test_first_page_starts_at_zero(self):
        assert page_offset(1, 10) == 0

    def test_offset_is_page_size_times_previous_pages(self):
        assert page_offset(3, 10) == 20
        assert page_offset(4, 5) == 15

    @pytest.mark.parametrize("page,size", [(0, 10), (-1, 10), (1, 0)])
    def test_invalid_arguments(self, page, size):
        with pytest.raises(ValueError):
            page_offset(page, size)


class TestLaunchDate:
    def test_iso_timestamp_to_long_date(self):
        assert format_launch_date("2019-04-03T00:00:00.000Z") == "April 3, 2019"

    def test_missing_values(self):
        assert format_launch_date(None) is None
        assert format_launch_date("") is None
        assert format_launch_date("not a date") is None


class TestFetchPage:
    def test_request_shape(self, session_factory, raw_capsules):
        session = session_factory(raw_capsules)
        client = CapsuleClient(base_url="http://wp.test/", token="secret", session=session)

        client.fetch_page(2, 10)

        args, kwargs = session.get.call_args
        assert args[0] == "http://wp.test/spacex/v1/capsules"
        assert kwargs["params"] == {"limit": 10, "offset": 10}
        assert kwargs["headers"] == {"Authorization": "Bearer secret"}

    def test_no_token_no_header(self, session_factory):
        session = session_factory([])
        CapsuleClient(base_url="http://wp.test", token=None, session=session).fetch_page(1)
        assert session.get.call_args.kwargs["headers"] == {}

    def test_success_normalizes_dates(self, session_factory, raw_capsules):
        client = CapsuleClient(base_url="http://wp.test", session=session_factory(raw_capsules))

        result = client.fetch_page(1)

        assert result.ok
        assert [c.capsule_serial for c in result.capsules] == ["C101", "C201", "C112"]
        assert result.capsules[0].original_launch == "December 8, 2010"
        assert result.capsules[2].original_launch is None
        assert all(isinstance(c, Capsule) for c in result.capsules)

    def test_raw_records_are_not_mutated(self, session_factory, raw_capsules):
        CapsuleClient(base_url="http://wp.test", session=session_factory(raw_capsules)).fetch_page(1)
        assert raw_capsules[0]["original_launch"] == "2010-12-08T15:43:00.000Z"

    def test_empty_array_is_an_empty_page(self, session_factory):
        result = CapsuleClient(base_url="http://wp.test", session=session_factory([])).fetch_page(1)
        assert result.ok
        assert result.capsules == []

    @pytest.mark.parametrize("payload", [None, "", {}])
    def test_falsy_body_is_fetch_error(self, session_factory, payload):
        result = CapsuleClient(base_url="http://wp.test", session=session_factory(payload)).fetch_page(1)
        assert not result.ok
        assert isinstance(result.error, FetchError)

    def test_non_array_body_is_fetch_error(self, session_factory):
        result = CapsuleClient(base_url="http://wp.test", session=session_factory({"code": "x"})).fetch_page(1)
        assert isinstance(result.error, FetchError)

    def test_transport_error_is_returned(self, session_factory):
        session = session_factory(exc=requests.ConnectionError("down"))
        result = CapsuleClient(base_url="http://wp.test", session=session).fetch_page(1)
        assert not result.ok
        assert isinstance(result.error, requests.ConnectionError)

    def test_http_error_is_returned(self, session_factory):
        session = session_factory([], status_error=requests.HTTPError("401"))
        result = CapsuleClient(base_url="http://wp.test", session=session).fetch_page(1)
        assert isinstance(result.error, requests.HTTPError)

    def test_single_attempt(self, session_factory):
        session = session_factory(exc=requests.Timeout("slow"))
        CapsuleClient(base_url="http://wp.test", session=session).fetch_page(1)
        assert session.get.call_count == 1


class TestValidation:
    def test_malformed_records_are_rejected(self, raw_capsules):
        del raw_capsules[0]["capsule_serial"]
        raw_capsules[1]["reuse_count"] = -1
        result = parse_capsules(raw_capsules + ["junk"])

        assert result.ok
        assert [c.capsule_serial for c in result.capsules] == ["C112"]
        assert result.rejected == 3

    def test_missions_are_typed(self, raw_capsules):
        capsule = parse_capsules(raw_capsules).capsules[1]
        assert [(m.name, m.flight) for m in capsule.missions] == [("DM-1", 74), ("CRS-20", 91)]
