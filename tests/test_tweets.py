import pytest
from datetime import datetime, timezone
from sqlmodel import select

from app.models.follower import Follower
from app.models.tweet import Tweet


def parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class TestPostTweet:

    @pytest.mark.asyncio
    async def test_post_tweet(self, client, register):
        alice = await register("alice")

        response = await client.post("/tweets", json={"text": "hello"}, headers=alice["headers"])

        assert response.status_code == 200
        tweet = response.json()["tweet"]
        assert tweet["text"] == "hello"
        assert tweet["tweetedBy"] == alice["id"]
        assert tweet["tweetedAt"]

    @pytest.mark.asyncio
    async def test_client_timestamp_and_author_are_ignored(self, client, register):
        alice = await register("alice")
        bob = await register("bob")

        response = await client.post(
            "/tweets",
            json={"text": "hi", "tweetedAt": "2000-01-01T00:00:00Z", "tweetedBy": bob["id"]},
            headers=alice["headers"]
        )

        tweet = response.json()["tweet"]
        assert tweet["tweetedBy"] == alice["id"]
        assert parse_timestamp(tweet["tweetedAt"]).year > 2000

    @pytest.mark.asyncio
    async def test_unauthenticated_post_writes_nothing(self, client, db_session):
        response = await client.post("/tweets", json={"text": "hello"})

        assert response.status_code == 401
        result = await db_session.exec(select(Tweet))
        assert result.all() == []

    @pytest.mark.asyncio
    async def test_invalid_token_post_writes_nothing(self, client, register, db_session):
        await register("alice")

        response = await client.post(
            "/tweets",
            json={"text": "hello"},
            headers={"Authorization": "Bearer forged"}
        )

        assert response.status_code == 401
        result = await db_session.exec(select(Tweet))
        assert result.all() == []

    @pytest.mark.asyncio
    async def test_empty_text_is_bad_request(self, client, register):
        alice = await register("alice")

        response = await client.post("/tweets", json={"text": ""}, headers=alice["headers"])

        assert response.status_code == 400


class TestFeed:

    @pytest.mark.asyncio
    async def test_feed_contains_only_followed_authors(self, client, register):
        alice = await register("alice")
        bob = await register("bob")
        carol = await register("carol")

        for text in ("b1", "b2"):
            await client.post("/tweets", json={"text": text}, headers=bob["headers"])
        await client.post("/tweets", json={"text": "c1"}, headers=carol["headers"])
        await client.post("/tweets", json={"text": "a1"}, headers=alice["headers"])

        await client.post(f"/users/{bob['id']}/followers", headers=alice["headers"])

        response = await client.get("/tweets", headers=alice["headers"])

        assert response.status_code == 200
        tweets = response.json()["tweets"]
        assert sorted(t["text"] for t in tweets) == ["b1", "b2"]
        assert all(t["tweetedBy"] == bob["id"] for t in tweets)

    @pytest.mark.asyncio
    async def test_feed_is_newest_first(self, client, register):
        alice = await register("alice")
        bob = await register("bob")
        for text in ("first", "second", "third"):
            await client.post("/tweets", json={"text": text}, headers=bob["headers"])
        await client.post(f"/users/{bob['id']}/followers", headers=alice["headers"])

        response = await client.get("/tweets", headers=alice["headers"])

        assert [t["text"] for t in response.json()["tweets"]] == ["third", "second", "first"]

    @pytest.mark.asyncio
    async def test_feed_empty_when_following_nobody(self, client, register):
        alice = await register("alice")
        await client.post("/tweets", json={"text": "mine"}, headers=alice["headers"])

        response = await client.get("/tweets", headers=alice["headers"])

        assert response.status_code == 200
        assert response.json() == {"tweets": []}

    @pytest.mark.asyncio
    async def test_duplicate_edges_do_not_duplicate_tweets(self, client, register, db_session):
        alice = await register("alice")
        bob = await register("bob")
        await client.post("/tweets", json={"text": "once"}, headers=bob["headers"])

        # The schema allows duplicate edges even though the API never writes them
        now = datetime.now(timezone.utc)
        db_session.add_all([
            Follower(follow_to=bob["id"], follow_by=alice["id"], follow_at=now),
            Follower(follow_to=bob["id"], follow_by=alice["id"], follow_at=now),
        ])
        await db_session.commit()

        response = await client.get("/tweets", headers=alice["headers"])

        assert [t["text"] for t in response.json()["tweets"]] == ["once"]

    @pytest.mark.asyncio
    async def test_feed_timestamps_match_post_response(self, client, register):
        alice = await register("alice")
        bob = await register("bob")
        await client.post(f"/users/{bob['id']}/followers", headers=alice["headers"])
        posted = (await client.post("/tweets", json={"text": "hi"}, headers=bob["headers"])).json()["tweet"]

        feed = (await client.get("/tweets", headers=alice["headers"])).json()["tweets"]

        assert feed[0]["tweetedAt"] == posted["tweetedAt"]
        assert parse_timestamp(feed[0]["tweetedAt"]).utcoffset().total_seconds() == 0
        assert feed[0]["tweetedAt"].endswith("Z")

    @pytest.mark.asyncio
    async def test_feed_requires_auth(self, client):
        response = await client.get("/tweets")
        assert response.status_code == 401


@pytest.mark.asyncio
async def test_signup_signin_tweet_scenario(client):
    before_signup = datetime.now(timezone.utc)

    signup = await client.post(
        "/signup",
        json={"handle": "alice", "name": "Alice", "email": "a@x.com", "password": "pw1"}
    )
    assert signup.status_code == 200
    user = signup.json()["user"]
    assert "password" not in user

    signin = await client.post("/signin", json={"email": "a@x.com", "password": "pw1"})
    assert signin.status_code == 200
    body = signin.json()
    assert body["userId"] == user["id"]

    tweet = await client.post(
        "/tweets",
        json={"text": "hello"},
        headers={"Authorization": f"Bearer {body['jwt']}"}
    )
    assert tweet.status_code == 200
    created = tweet.json()["tweet"]
    assert created["tweetedBy"] == body["userId"]
    assert parse_timestamp(created["tweetedAt"]) > before_signup


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_unknown_path_is_not_found(client):
    response = await client.get("/nope")

    assert response.status_code == 404
    assert response.json()["detail"] == "Not Found"


@pytest.mark.asyncio
async def test_wrong_method_is_not_allowed(client):
    response = await client.delete("/tweets")

    assert response.status_code == 405
    assert set(response.headers["allow"].replace(" ", "").split(",")) == {"GET", "POST"}
