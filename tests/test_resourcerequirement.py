import pytest

from ocmadm.resourcerequirement import (
    ResourceQosClass,
    ensure_quantity,
    new_resource_requirement,
    parse_quantity,
)


def test_resource_requirement():
    limits = {"cpu": "200m", "memory": "256Mi"}
    requests = {"cpu": "100m", "memory": "128Mi"}
    r = new_resource_requirement(ResourceQosClass.RESOURCE_REQUIREMENT, limits, requests)
    assert str(r.limits["cpu"]) == "200m"
    assert str(r.requests["cpu"]) == "100m"
    assert str(r.limits["memory"]) == "256Mi"
    assert str(r.requests["memory"]) == "128Mi"
    assert r.type == ResourceQosClass.RESOURCE_REQUIREMENT


def _parse_all(values):
    return {name: parse_quantity(text) for name, text in (values or {}).items()}


@pytest.mark.parametrize(
    "limits,requests,want_err",
    [
        ({"cpu": "200m", "memory": "256Mi"}, {"cpu": "100m", "memory": "128Mi"}, False),
        ({"cpu": "200m", "memory": "256Mi"}, {"cpu": "200m", "memory": "256Mi"}, False),
        ({"cpu": "100m", "memory": "128Mi"}, {"cpu": "200m", "memory": "256Mi"}, True),
        ({"cpu": "100m", "memory": "128Mi"}, None, False),
        (None, {"cpu": "200m", "memory": "256Mi"}, False),
    ],
    ids=[
        "requests less than limits",
        "requests equal to limits",
        "requests greater than limits",
        "only limits but no requests",
        "only requests but no limits",
    ],
)
def test_ensure_quantity(limits, requests, want_err):
    lim, req = _parse_all(limits), _parse_all(requests)
    if want_err:
        with pytest.raises(ValueError, match="must be less than or equal to limits"):
            ensure_quantity(lim, req)
    else:
        assert ensure_quantity(lim, req) is None


def test_empty_with_resource_requirement_type_fails():
    with pytest.raises(ValueError, match="both limits and requests are not set"):
        new_resource_requirement(ResourceQosClass.RESOURCE_REQUIREMENT, {}, {})


def test_empty_with_default_type_keeps_type():
    r = new_resource_requirement(ResourceQosClass.DEFAULT, None, None)
    assert r.type == ResourceQosClass.DEFAULT
    assert r.limits is None and r.requests is None


def test_unset_type_becomes_resource_requirement():
    r = new_resource_requirement("", {"cpu": "1"}, None)
    assert r.type == ResourceQosClass.RESOURCE_REQUIREMENT
    assert r.requests == {}


def test_other_type_with_limits_fails():
    with pytest.raises(ValueError, match="resource type must be ResourceRequirement"):
        new_resource_requirement(ResourceQosClass.BEST_EFFORT, {"cpu": "1"}, None)


def test_requests_over_limits_fails():
    with pytest.raises(ValueError):
        new_resource_requirement(None, {"cpu": "100m"}, {"cpu": "200m"})


def test_invalid_quantity_fails():
    with pytest.raises(ValueError):
        new_resource_requirement(None, {"cpu": "lots"}, None)


@pytest.mark.parametrize(
    "text,canonical",
    [("200m", "200m"), ("256Mi", "256Mi"), ("1000", "1k"), ("0.5", "500m"), ("1024Mi", "1Gi"), ("1e3", "1e3"), ("0", "0")],
)
def test_canonical_form(text, canonical):
    assert str(parse_quantity(text)) == canonical


def test_quantity_comparison():
    assert parse_quantity("1000m") == parse_quantity("1")
    assert parse_quantity("1Gi") > parse_quantity("1G")
    assert parse_quantity("128Mi") < parse_quantity("256Mi")


@pytest.mark.parametrize("text", ["", "abc", "1K", "1.2.3", "5Zi"])
def test_parse_quantity_rejects(text):
    with pytest.raises(ValueError):
        parse_quantity(text)