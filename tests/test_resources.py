"""
Tests for wykop_api/adapters/resources.py (the links/link accessors).
"""
import json

import pytest

from tests.conftest import TESTDATA, RecordingTransport
from wykop_api.core.domain.models import Dig, Link
from wykop_api.core.domain.sorting import PromotedSort, UpcomingSort
from wykop_api.core.errors import OperationNotImplementedError
from wykop_api.core.interfaces.resources import LinkResource, LinksResource


class TestLinks:
    """Test links/promoted and links/upcoming."""

    def test_promoted(self, make_client, json_transport):
        transport = json_transport([{"id": 10}, {"id": 11}])
        links = make_client(transport).links().promoted(1, PromotedSort.DAY)
        assert [link.id for link in links] == [10, 11]
        assert all(isinstance(link, Link) for link in links)
        assert transport.paths == ["/links/promoted/page,1,sort,day,appkey,app"]

    def test_upcoming(self, make_client, json_transport):
        transport = json_transport([{"id": 10}])
        links = make_client(transport).links().upcoming(3, UpcomingSort.VOTES)
        assert len(links) == 1
        assert transport.paths == ["/links/upcoming/page,3,sort,votes,appkey,app"]

    def test_sort_passed_through_verbatim(self, make_client, json_transport):
        """Unknown sort values are not validated by the accessor."""
        transport = json_transport([])
        make_client(transport).links().promoted(2, "year")
        assert transport.paths == ["/links/promoted/page,2,sort,year,appkey,app"]

    def test_empty_list(self, make_client, json_transport):
        assert make_client(json_transport([])).links().upcoming(1, UpcomingSort.DATE) == []

    def test_user_vote_accepts_bool_and_string(self, make_client, json_transport):
        """Links without a vote carry `false`; voted links carry `dig`/`bury`."""
        transport = json_transport([{"id": 1, "user_vote": False}, {"id": 2, "user_vote": "dig"}])
        links = make_client(transport).links().promoted(1, PromotedSort.DAY)
        assert [link.user_vote for link in links] == [False, "dig"]


class TestLink:
    """Test link/index and link/digs."""

    def test_index_sends_user_key(self, make_client, json_transport):
        transport = json_transport({"id": 10})
        link = make_client(transport).link().index(10)
        assert link.id == 10
        assert transport.paths == ["/link/index/10/appkey,app,userkey,user"]

    def test_index_full_payload(self, make_client):
        body = (TESTDATA / "link2.json").read_bytes()
        link = make_client(RecordingTransport(body)).link().index(1475611)
        assert link.id == 1475611
        assert link.source_url == "https://example.pl/kot-na-drzewie"
        assert link.vote_count == 512
        assert link.user_lists == [12, 48]
        assert link.user_vote == "dig"
        assert link.user_observe is True
        assert link.author == "janusz_kot"
        assert link.user_group.display_name == "Bordowy"

    def test_digs(self, make_client, json_transport):
        transport = json_transport([{"author": "Imię", "author_group": 0}, {"author": "drugi"}])
        digs = make_client(transport).link().digs(10)
        assert [d.author for d in digs] == ["Imię", "drugi"]
        assert all(isinstance(d, Dig) for d in digs)
        assert transport.paths == ["/link/digs/10/appkey,app"]

    @pytest.mark.parametrize(
        "call",
        [
            lambda r: r.comments(1),
            lambda r: r.reports(1),
            lambda r: r.related(1),
            lambda r: r.bury_reasons(),
        ],
        ids=["comments", "reports", "related", "bury_reasons"],
    )
    def test_unimplemented_operations(self, make_client, call):
        transport = RecordingTransport(json.dumps([]).encode())
        resource = make_client(transport).link()
        with pytest.raises(OperationNotImplementedError):
            call(resource)
        assert transport.requests == []

    def test_not_implemented_is_distinct_signal(self, make_client):
        resource = make_client(RecordingTransport()).link()
        with pytest.raises(NotImplementedError) as excinfo:
            resource.comments(5)
        assert excinfo.value.operation == "link/comments"


class TestProtocols:
    """The accessor satisfies both resource contracts."""

    def test_links_resource(self, make_client):
        assert isinstance(make_client(RecordingTransport()).links(), LinksResource)

    def test_link_resource(self, make_client):
        assert isinstance(make_client(RecordingTransport()).link(), LinkResource)
