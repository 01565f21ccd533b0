# tests/test_envelope.py
import httpx
import pytest

from graphloom.envelope import (
    PagedResult,
    decode_ack,
    decode_entity,
    decode_id,
    decode_id_map,
    decode_list,
    parse_json,
)
from graphloom.exceptions import ApiError, MalformedResponse
from graphloom.models import Post, User
from graphloom.registry import EntityKind, decoder_for

NEXT_URL = "https://graph.facebook.com/me/feed?limit=2&until=1340000000"
PREVIOUS_URL = "https://graph.facebook.com/me/feed?limit=2&since=1340200000"


# --- parse_json ---
def test_parse_json_returns_decoded_body():
    response = httpx.Response(200, json={"id": "1"})
    assert parse_json(response) == {"id": "1"}


def test_parse_json_rejects_invalid_json():
    response = httpx.Response(200, text="<html>oops</html>")
    with pytest.raises(MalformedResponse, match="not valid JSON"):
        parse_json(response)


def test_parse_json_raises_for_error_body_on_success_status():
    body = {
        "error": {
            "message": "(#100) Unknown fields: foo",
            "type": "OAuthException",
            "code": 100,
        }
    }
    response = httpx.Response(200, json=body)

    with pytest.raises(ApiError) as exc_info:
        parse_json(response)

    assert exc_info.value.error_code == 100
    assert exc_info.value.error_type == "OAuthException"
    assert exc_info.value.status_code == 200


# --- decode_list ---
def test_decode_list_with_paging():
    envelope = {
        "data": [{"id": "1_2", "message": "hello"}, {"id": "1_3"}],
        "paging": {"next": NEXT_URL, "previous": PREVIOUS_URL},
    }

    result = decode_list(envelope, decoder_for(EntityKind.POST))

    assert isinstance(result, PagedResult)
    assert len(result) == 2
    assert isinstance(result[0], Post)
    assert result[0].message == "hello"
    assert result.next == NEXT_URL
    assert result.previous == PREVIOUS_URL
    assert result.has_next and result.has_previous
    assert result.raw == envelope
    assert result.element_decoder is decoder_for(EntityKind.POST)


def test_decode_list_without_paging():
    result = decode_list({"data": []}, decoder_for(EntityKind.POST))
    assert result.data == []
    assert result.next is None
    assert result.previous is None
    assert not result


def test_decode_list_keeps_summary():
    envelope = {"data": [], "summary": {"total_count": 42}}
    result = decode_list(envelope, decoder_for(EntityKind.COMMENT))
    assert result.summary == {"total_count": 42}


@pytest.mark.parametrize(
    "envelope",
    [
        {"paging": {}},
        {"data": {"id": "1"}},
        [{"id": "1"}],
        False,
        {"data": [], "paging": "next"},
    ],
)
def test_decode_list_rejects_wrong_shape(envelope):
    with pytest.raises(MalformedResponse):
        decode_list(envelope, decoder_for(EntityKind.POST))


def test_decode_list_rejects_undecodable_element():
    envelope = {"data": [{"id": "1"}, {"id": {"nested": True}}]}
    with pytest.raises(MalformedResponse):
        decode_list(envelope, decoder_for(EntityKind.USER))


def test_paged_result_behaves_as_sequence():
    result = decode_list(
        {"data": [{"id": "a"}, {"id": "b"}, {"id": "c"}]},
        decoder_for(EntityKind.USER),
    )
    assert [user.id for user in result] == ["a", "b", "c"]
    assert [user.id for user in result[1:]] == ["b", "c"]
    assert result[-1].id == "c"


def test_paged_result_dump_excludes_decoder():
    result = decode_list({"data": [{"id": "a"}]}, decoder_for(EntityKind.USER))
    assert "element_decoder" not in result.model_dump()


# --- decode_entity ---
def test_decode_entity():
    user = decode_entity({"id": "4", "name": "Mark"}, decoder_for(EntityKind.USER))
    assert isinstance(user, User)
    assert user.name == "Mark"


def test_decode_entity_false_means_absent():
    assert decode_entity(False, decoder_for(EntityKind.USER)) is None


def test_decode_entity_rejects_non_object():
    with pytest.raises(MalformedResponse):
        decode_entity("just text", decoder_for(EntityKind.USER))


# --- decode_ack ---
@pytest.mark.parametrize(
    "body, expected",
    [("true", True), ("false", False), ("  true\n", True), ("\tfalse ", False)],
)
def test_decode_ack(body: str, expected: bool):
    assert decode_ack(body) is expected


@pytest.mark.parametrize("body", ["", "ok", "TRUE", '{"success": true}'])
def test_decode_ack_rejects_anything_else(body: str):
    with pytest.raises(MalformedResponse):
        decode_ack(body)


# --- decode_id ---
def test_decode_id():
    assert decode_id({"id": "1_2"}) == "1_2"
    assert decode_id({"id": 123}) == "123"


@pytest.mark.parametrize("envelope", [{}, {"id": None}, {"id": True}, "1_2", True])
def test_decode_id_rejects_missing_id(envelope):
    with pytest.raises(MalformedResponse):
        decode_id(envelope)


# --- decode_id_map ---
def test_decode_id_map_keeps_key_order():
    envelope = {"5": {"id": "5", "name": "Chris"}, "4": {"id": "4", "name": "Mark"}}
    users = decode_id_map(envelope, decoder_for(EntityKind.USER))
    assert [u.name for u in users] == ["Chris", "Mark"]


def test_decode_id_map_rejects_list():
    with pytest.raises(MalformedResponse):
        decode_id_map([{"id": "4"}], decoder_for(EntityKind.USER))
