"""In-process fixture data store with belongsTo eager loading.

    store = FixtureStore()
    posts = store.collection("posts")
    comments = store.collection("comments")
    comments.belongs_to([{"posts": "post_id"}])

    post = posts.create({"title": "Hello"})
    comments.create({"post_id": post["id"], "text": "First!"})
    posts.find_one({"id": post["id"]}, include=["comments"])
"""

from fixturestore.associations import Association, RelationGraph, parse_associations
from fixturestore.backends import JsonFileBackend, KeyValueBackend, MemoryBackend
from fixturestore.collection import Collection
from fixturestore.config import StoreConfig, load_config
from fixturestore.factory import open_store
from fixturestore.fixtures import load_fixtures
from fixturestore.store import FixtureStore
from fixturestore.table import find_index, generate_id

__all__ = [
    "Association",
    "Collection",
    "FixtureStore",
    "JsonFileBackend",
    "KeyValueBackend",
    "MemoryBackend",
    "RelationGraph",
    "StoreConfig",
    "find_index",
    "generate_id",
    "load_config",
    "load_fixtures",
    "open_store",
    "parse_associations",
]
