from unittest.mock import Mock
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from ingest.errors import NetworkError
from ingest.schemas import Embed, EmbedAuthor
from publish.batcher import post_embeds
from publish.config import WebhookConfig

CONFIG = WebhookConfig(id="123", token="secret")
PREFIX = "@everyone, hello"


def make_embeds(count):
    return [Embed(title=f"Event {i}", description="", author=EmbedAuthor(name="CompSoc")) for i in range(count)]


def test_empty_list_sends_nothing():
    poster = Mock()
    assert post_embeds([], CONFIG, content=PREFIX, poster=poster) == []
    poster.assert_not_called()


def test_ten_embeds_single_call_with_prefix():
    embeds = make_embeds(10)
    poster = Mock(return_value="response")
    results = post_embeds(embeds, CONFIG, content=PREFIX, poster=poster)

    assert results == ["response"]
    poster.assert_called_once()
    message, config = poster.call_args[0]
    assert message.embeds == embeds
    assert message.content == PREFIX
    assert config is CONFIG


def test_twenty_three_embeds_three_batches():
    embeds = make_embeds(23)
    poster = Mock(side_effect=["r1", "r2", "r3"])
    results = post_embeds(embeds, CONFIG, content=PREFIX, poster=poster)

    assert results == ["r1", "r2", "r3"]
    messages = [call[0][0] for call in poster.call_args_list]
    assert [len(m.embeds) for m in messages] == [10, 10, 3]
    assert [m.content for m in messages] == [PREFIX, None, None]
    assert [e.title for m in messages for e in m.embeds] == [e.title for e in embeds]


def test_batches_without_prefix():
    poster = Mock(return_value="r")
    post_embeds(make_embeds(11), CONFIG, poster=poster)
    assert all(call[0][0].content is None for call in poster.call_args_list)
    assert "content" not in poster.call_args_list[0][0][0].to_dict()


def test_failure_stops_later_batches():
    poster = Mock(side_effect=["r1", NetworkError("Webhook answered 429", status_code=429), "r3"])
    with pytest.raises(NetworkError):
        post_embeds(make_embeds(25), CONFIG, content=PREFIX, poster=poster)
    assert poster.call_count == 2
