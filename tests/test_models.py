from __future__ import annotations

import pydantic
import pytest

from core.domain.models import RandomUserResponse, User


def test_decodes_full_response_in_order(user_payload, response_payload):
    payload = response_payload(
        user_payload(uuid="u-1", first="Aino"),
        user_payload(uuid="u-2", first="Bea"),
        user_payload(uuid="u-3", first="Cleo"),
    )

    response = RandomUserResponse.model_validate(payload)

    assert [u.id for u in response.results] == ["u-1", "u-2", "u-3"]
    assert response.info.seed == "56d27f4a53bd5441"
    assert response.info.results == 3
    assert response.info.version == "1.4"


@pytest.mark.parametrize("postcode", [47350, "47350"])
def test_postcode_int_or_string_normalizes_to_string(user_payload, postcode):
    user = User.model_validate(user_payload(postcode=postcode))

    assert user.location.postcode == "47350"


def test_postcode_keeps_alphanumeric_strings(user_payload):
    user = User.model_validate(user_payload(postcode="EC1A 1BB"))

    assert user.location.postcode == "EC1A 1BB"


@pytest.mark.parametrize("postcode", [{}, [], None, True, 12.5])
def test_postcode_rejects_other_shapes(user_payload, postcode):
    with pytest.raises(pydantic.ValidationError) as excinfo:
        User.model_validate(user_payload(postcode=postcode))

    assert "postcode" in str(excinfo.value)


def test_identity_is_login_uuid_not_external_id(user_payload):
    user = User.model_validate(user_payload(uuid="stable-uuid"))

    assert user.id == "stable-uuid"
    assert user.user_id is not None
    assert user.user_id.name == "HETU"
    assert user.user_id.value == "NaNNA123undefined"


def test_external_id_is_optional_and_nullable(user_payload):
    without = user_payload()
    del without["id"]
    nulls = user_payload(id={"name": "", "value": None})

    assert User.model_validate(without).user_id is None
    assert User.model_validate(nulls).user_id.value is None


def test_missing_required_field_fails(user_payload):
    payload = user_payload()
    del payload["login"]["uuid"]

    with pytest.raises(pydantic.ValidationError):
        User.model_validate(payload)


def test_unknown_fields_are_ignored(user_payload):
    user = User.model_validate(user_payload(extra_field={"anything": 1}))

    assert not hasattr(user, "extra_field")


def test_empty_results_decode_at_schema_level(response_payload):
    response = RandomUserResponse.model_validate(response_payload())

    assert response.results == []


def test_encode_then_decode_is_field_equal(user_payload, response_payload):
    original = RandomUserResponse.model_validate(
        response_payload(user_payload(uuid="a", postcode=1234), user_payload(uuid="b", postcode="B-77"))
    )

    wire = original.model_dump(mode="json", by_alias=True)
    decoded = RandomUserResponse.model_validate(wire)

    assert decoded == original
    assert wire["results"][0]["location"]["postcode"] == "1234"
    assert wire["results"][0]["id"] == {"name": "HETU", "value": "NaNNA123undefined"}


def test_display_helpers(make_user):
    user = make_user()

    assert user.name.full_name == "Aino Lampi"
    assert user.age_text == "35 years old"
    assert user.location.summary == "Pori, Satakunta, Finland"
    assert user.location.full_address == "4512 Hämeenkatu, Pori, Satakunta 47350, Finland"


def test_models_are_immutable(make_user):
    user = make_user()

    with pytest.raises(pydantic.ValidationError):
        user.email = "other@example.com"


@pytest.mark.parametrize(
    "path",
    [("dob", "age"), ("registered", "age"), ("location", "street", "number")],
)
def test_integer_fields_reject_numeric_strings(user_payload, path):
    payload = user_payload()
    target = payload
    for key in path[:-1]:
        target = target[key]
    target[path[-1]] = "35"

    with pytest.raises(pydantic.ValidationError):
        User.model_validate(payload)


def test_info_counters_reject_numeric_strings(user_payload, response_payload):
    payload = response_payload(user_payload())
    payload["info"]["page"] = "1"

    with pytest.raises(pydantic.ValidationError):
        RandomUserResponse.model_validate(payload)
