import json

import pytest

from storefront_client.credentials import TOKEN_KEY, FileCredentialStore, InMemoryCredentialStore
from storefront_client.credentials.redis_real import RedisCredentialStore


class FakeRedis:
    def __init__(self):
        self.values = {}
        self.ttls = {}

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        self.values[key] = value

    def setex(self, key, ttl, value):
        self.values[key] = value
        self.ttls[key] = ttl

    def delete(self, key):
        return 1 if self.values.pop(key, None) is not None else 0

    def ping(self):
        return True


def test_memory_store_roundtrip_and_idempotent_delete():
    store = InMemoryCredentialStore()
    assert store.get(TOKEN_KEY) is None

    store.set(TOKEN_KEY, "abc123")
    assert store.get(TOKEN_KEY) == "abc123"
    assert TOKEN_KEY in store

    store.delete(TOKEN_KEY)
    store.delete(TOKEN_KEY)
    assert store.get(TOKEN_KEY) is None


def test_file_store_persists_across_instances(tmp_path):
    path = tmp_path / "nested" / "credentials.json"
    FileCredentialStore(path).set(TOKEN_KEY, "abc123")

    reopened = FileCredentialStore(path)
    assert reopened.get(TOKEN_KEY) == "abc123"
    assert json.loads(path.read_text(encoding="utf-8")) == {TOKEN_KEY: "abc123"}

    reopened.delete(TOKEN_KEY)
    assert FileCredentialStore(path).get(TOKEN_KEY) is None


def test_file_store_delete_missing_file_is_noop(tmp_path):
    path = tmp_path / "credentials.json"
    store = FileCredentialStore(path)

    store.delete(TOKEN_KEY)

    assert not path.exists()


def test_file_store_keeps_other_keys(tmp_path):
    store = FileCredentialStore(tmp_path / "credentials.json")
    store.set(TOKEN_KEY, "abc123")
    store.set("user", "admin@tanganyika.com")

    store.delete(TOKEN_KEY)

    assert store.get("user") == "admin@tanganyika.com"
    assert store.get(TOKEN_KEY) is None


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", ""])
def test_file_store_treats_bad_content_as_empty(tmp_path, content):
    path = tmp_path / "credentials.json"
    path.write_text(content, encoding="utf-8")
    store = FileCredentialStore(path)

    assert store.get(TOKEN_KEY) is None
    store.set(TOKEN_KEY, "abc123")
    assert store.get(TOKEN_KEY) == "abc123"


def test_redis_store_namespaces_keys():
    fake = FakeRedis()
    store = RedisCredentialStore(client=fake)

    store.set(TOKEN_KEY, "abc123")

    assert fake.values == {"credential:token": "abc123"}
    assert store.get(TOKEN_KEY) == "abc123"
    assert store.ping() is True


def test_redis_store_ttl_and_bytes_values():
    fake = FakeRedis()
    store = RedisCredentialStore(client=fake, ttl=3600)

    store.set(TOKEN_KEY, "abc123")
    assert fake.ttls == {"credential:token": 3600}

    fake.values["credential:token"] = b"from-bytes"
    assert store.get(TOKEN_KEY) == "from-bytes"


def test_redis_store_delete_absent_is_noop():
    store = RedisCredentialStore(client=FakeRedis())
    store.delete(TOKEN_KEY)
    assert store.get(TOKEN_KEY) is None


def test_redis_store_requires_url_or_client():
    with pytest.raises(ValueError):
        RedisCredentialStore()
