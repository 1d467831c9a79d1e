from __future__ import annotations

from domain.request import HeaderBag, RequestData


def test_request_data_defaults() -> None:
    data = RequestData()

    assert data.method == "method-not-set"
    assert data.url == "url-not-set"


def test_header_bag_collects_repeated_names() -> None:
    bag = HeaderBag()

    bag.add("Accept", "a")
    bag.add("Accept", "b")
    bag.add("X-Id", "1")

    assert bag.snapshot() == {"Accept": ["a", "b"], "X-Id": "1"}


def test_header_bag_snapshot_is_a_copy() -> None:
    bag = HeaderBag()
    bag.add("Accept", "a")
    bag.add("Accept", "b")

    snapshot = bag.snapshot()
    snapshot["Accept"].append("c")

    assert bag.snapshot() == {"Accept": ["a", "b"]}


def test_header_bag_remove_missing_is_noop() -> None:
    bag = HeaderBag()

    bag.remove("Accept")

    assert bag.snapshot() == {}

