# tests/test_models.py
import json
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from graphloom import models
from graphloom.exceptions import MalformedResponse
from graphloom.params import Media
from graphloom.registry import EntityKind, decoder_for, model_for


class TestEntities:
    def test_graph_time_offset_without_colon(self):
        post = models.Post.model_validate(
            {"id": "1_2", "created_time": "2012-06-20T01:30:00+0000"}
        )
        assert post.created_time == datetime(2012, 6, 20, 1, 30, tzinfo=timezone.utc)

    def test_graph_time_negative_offset(self):
        event = models.Event.model_validate({"start_time": "2012-06-20T19:00:00-0700"})
        assert event.start_time.utcoffset() == timedelta(hours=-7)

    def test_from_alias(self):
        comment = models.Comment.model_validate(
            {"id": "c1", "from": {"id": "42", "name": "Ann"}, "message": "hi"}
        )
        assert comment.from_.id == "42"
        assert comment.from_.name == "Ann"

    def test_populate_by_field_name(self):
        comment = models.Comment(from_=models.Reference(id="42"))
        assert comment.from_.id == "42"

    def test_missing_keys_are_none(self):
        user = models.User.model_validate({"id": "1"})
        assert user.name is None
        assert user.education is None

    def test_unknown_keys_are_kept(self):
        user = models.User.model_validate({"id": "1", "quotes": "Carpe diem"})
        assert user.quotes == "Carpe diem"

    def test_entities_are_frozen(self):
        user = models.User.model_validate({"id": "1", "name": "Ann"})
        with pytest.raises(ValidationError):
            user.name = "Bob"

    def test_nested_references(self):
        post = models.Post.model_validate(
            {
                "id": "1_2",
                "to": {"data": [{"id": "3", "name": "Cy"}]},
                "likes": {"data": [], "count": 4},
            }
        )
        assert [r.id for r in post.to.data] == ["3"]
        assert post.likes.count == 4

    def test_test_user(self):
        user = models.TestUser.model_validate(
            {"id": "100", "access_token": "tok", "login_url": "https://x/login"}
        )
        assert user.access_token == "tok"


class TestRegistry:
    def test_every_kind_has_decoder(self):
        for kind in EntityKind:
            assert callable(decoder_for(kind))

    def test_raw_returns_value_unchanged(self):
        value = {"anything": [1, 2]}
        assert decoder_for(EntityKind.RAW)(value) is value

    def test_model_for(self):
        assert model_for(EntityKind.USER) is models.User
        assert model_for(EntityKind.RSVP_STATUS) is models.RSVPStatus
        with pytest.raises(KeyError):
            model_for(EntityKind.RAW)

    def test_decoder_wraps_validation_errors(self):
        decode = decoder_for(EntityKind.USER)
        with pytest.raises(MalformedResponse, match="Could not decode User"):
            decode({"id": "1", "timezone": "not a number"})

    def test_decoder_rejects_non_objects(self):
        with pytest.raises(MalformedResponse):
            decoder_for(EntityKind.POST)("just a string")


class TestUpdates:
    def test_post_update_requires_message_or_link(self):
        with pytest.raises(ValidationError, match="requires 'message' or 'link'"):
            models.PostUpdate(name="no content")

    def test_post_update_parameters(self):
        update = models.PostUpdate(
            message="hello",
            link="https://example.com",
            place="123",
            tags=["1", "2"],
            privacy=models.PrivacySetting(value="CUSTOM", allow=["5", "6"]),
            published=False,
        )

        params = dict(update.to_parameters().pairs())

        assert params["message"] == "hello"
        assert params["link"] == "https://example.com"
        assert params["tags"] == "1,2"
        assert json.loads(params["privacy"]) == {"value": "CUSTOM", "allow": "5,6"}
        assert params["published"] is False
        assert "picture" not in params

    def test_scheduled_publish_time_formatting(self):
        update = models.PostUpdate(
            message="later",
            scheduled_publish_time=datetime(2030, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        )
        params = dict(update.to_parameters().pairs())
        assert params["scheduled_publish_time"] == "2030-01-02T03:04:05+0000"

    def test_scheduled_publish_time_unix(self):
        update = models.PostUpdate(message="later", scheduled_publish_time=1893456000)
        params = dict(update.to_parameters().pairs())
        assert params["scheduled_publish_time"] == 1893456000

    def test_event_update_times(self):
        update = models.EventUpdate(
            name="Party",
            start_time=datetime(2030, 5, 1, 20, 0),
            location="Home",
        )
        assert update.to_parameters().pairs() == [
            ("name", "Party"),
            ("start_time", "2030-05-01T20:00:00"),
            ("location", "Home"),
        ]

    def test_album_create(self):
        album = models.AlbumCreate(
            name="Trip", privacy=models.PrivacySetting(value="SELF")
        )
        assert album.to_parameters().pairs() == [
            ("name", "Trip"),
            ("privacy", '{"value": "SELF"}'),
        ]

    def test_checkin_create(self):
        checkin = models.CheckinCreate(
            place="110506962309835",
            coordinates=models.GeoLocation(latitude=52.5, longitude=13.4),
            tags=["1"],
            message="Here",
        )
        assert checkin.to_parameters().pairs() == [
            ("place", "110506962309835"),
            ("coordinates", '{"latitude": 52.5, "longitude": 13.4}'),
            ("tags", "1"),
            ("message", "Here"),
        ]

    @pytest.mark.parametrize(
        "latitude, longitude", [(91, 0), (-91, 0), (0, 181), (0, -181)]
    )
    def test_geolocation_bounds(self, latitude, longitude):
        with pytest.raises(ValidationError):
            models.GeoLocation(latitude=latitude, longitude=longitude)

    def test_geolocation_center(self):
        assert models.GeoLocation(latitude=1.5, longitude=-2.25).as_center() == "1.5,-2.25"

    def test_tag_update_bounds(self):
        assert models.TagUpdate(to="1", x=50, y=0).to_parameters().pairs() == [
            ("to", "1"),
            ("x", 50.0),
            ("y", 0.0),
        ]
        with pytest.raises(ValidationError):
            models.TagUpdate(to="1", x=101)

    def test_photo_upload_puts_media_first(self):
        media = Media(name="a.jpg", content=b"\xff\xd8")
        upload = models.PhotoUpload(source=media, message="pic")

        params = upload.to_parameters()

        assert params.has_media()
        assert params.pairs() == [("source", media), ("message", "pic")]
