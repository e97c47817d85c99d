import pytest
from pydantic import ValidationError

from core.models import POST_SHAPE, POSTS_SHAPE, ErrorEnvelope


def test_post_drops_unknown_fields():
    post = POST_SHAPE.validate_json(b'{"userId": 1, "id": 2, "title": "t", "body": "b", "extra": true}')

    assert POST_SHAPE.dump_json(post, by_alias=True) == b'{"userId":1,"id":2,"title":"t","body":"b"}'


def test_empty_object_decodes_to_zero_values():
    post = POST_SHAPE.validate_json(b"{}")

    assert post.user_id == 0
    assert post.id == 0
    assert post.title == ""
    assert post.body == ""


def test_string_id_is_rejected():
    with pytest.raises(ValidationError):
        POST_SHAPE.validate_json(b'{"id": "1"}')


def test_sequence_shape_rejects_single_object():
    with pytest.raises(ValidationError):
        POSTS_SHAPE.validate_json(b'{"id": 1}')


def test_error_envelope_needs_a_message():
    with pytest.raises(ValidationError):
        ErrorEnvelope(type="server_error", errors=[])


def test_error_envelope_serialization():
    envelope = ErrorEnvelope.single("not_found", "Resource not found")

    assert envelope.model_dump_json() == '{"type":"not_found","errors":["Resource not found"]}'


def test_null_fields_decode_to_zero_values():
    post = POST_SHAPE.validate_json(b'{"userId": null, "id": null, "title": null, "body": null}')

    assert POST_SHAPE.dump_json(post, by_alias=True) == b'{"userId":0,"id":0,"title":"","body":""}'
