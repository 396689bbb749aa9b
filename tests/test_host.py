"""Tests for the reference host and snapshot normalisation."""

import pytest

from layercake import Algebra, InvocationError, default_algebra, Id, Nil
from layercake.host import DirectHost, Element, Entry, Fragment, h, to_json
from fakes import CountingHost, Recorder


def test_h_builds_elements() -> None:
    node = h("div", {"class": "box"}, "text", h("span"))

    assert isinstance(node, Element)
    assert node.type == "div"
    assert node.props == {"class": "box"}
    assert node.children == ["text", Element(type="span")]


def test_invoke_passes_a_copy_of_props() -> None:
    props = {"foo": 1}

    def mutating(received):
        received["foo"] = 2
        return received["foo"]

    assert DirectHost().invoke(mutating, props) == 2
    assert props == {"foo": 1}


def test_invoke_rejects_non_callable() -> None:
    with pytest.raises(InvocationError) as exc_info:
        DirectHost().invoke("not a component", {})

    assert exc_info.value.target == "not a component"
    assert isinstance(exc_info.value, TypeError)


def test_group_preserves_order_and_keys() -> None:
    node = DirectHost().group([("l", "first"), ("r", "second")])

    assert node == Fragment(entries=[Entry(key="l", node="first"), Entry(key="r", node="second")])
    assert node.keys == ["l", "r"]
    assert node.nodes == ["first", "second"]


def test_group_rejects_duplicate_keys() -> None:
    with pytest.raises(ValueError, match="Duplicate group keys"):
        DirectHost().group([("l", "a"), ("l", "b")])


def test_to_json_empty_render() -> None:
    assert to_json(None) is None
    assert to_json(Fragment()) is None
    assert to_json(DirectHost().group([("l", None), ("r", None)])) is None


def test_to_json_splices_nested_fragments() -> None:
    host = DirectHost()
    inner = host.group([("l", None), ("r", "a")])
    outer = host.group([("l", inner), ("r", "b")])

    assert to_json(outer) == ["a", "b"]


def test_to_json_unwraps_single_item() -> None:
    assert to_json(DirectHost().group([("l", None), ("r", h("p"))])) == {
        "type": "p",
        "props": {},
        "children": None,
    }


def test_to_json_flattens_fragments_inside_elements() -> None:
    fragment = DirectHost().group([("l", "x"), ("r", None)])

    assert to_json(h("div", None, fragment, "y")) == {
        "type": "div",
        "props": {},
        "children": ["x", "y"],
    }


def test_default_algebra_uses_direct_host() -> None:
    assert isinstance(default_algebra.host, DirectHost)
    assert default_algebra.Id is Id
    assert default_algebra.Nil is Nil


def test_algebra_routes_through_its_host() -> None:
    host = CountingHost()
    algebra = Algebra(host=host)
    x, y = Recorder("x"), Recorder("y")

    host.invoke(algebra.concat(x, y), {"foo": 1})

    assert host.groups == 1
    assert host.invokes > 2
    assert x.seen == [{"foo": 1}]
    assert y.seen == [{"foo": 1}]
