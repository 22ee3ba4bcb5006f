"""Tests for include-spec parsing and the relation graph."""

from fixturestore.associations import Association, RelationGraph, parse_associations


class TestParseAssociations:
    def test_names_and_dependencies(self):
        assoc = parse_associations(
            ["first", {"second": ["third", {"fourth": ["fifth", "sixth"]}]}]
        )

        assert len(assoc) == 2

        # first has no nested dependencies
        assert assoc[0].name == "first"
        assert assoc[0].deps == []

        # second has two: "third" and "fourth"
        assert assoc[1].name == "second"
        assert len(assoc[1].deps) == 2

    def test_deps_parse_one_level_at_a_time(self):
        (second,) = parse_associations([{"second": ["third", {"fourth": ["fifth"]}]}])
        nested = parse_associations(second.deps)
        assert [a.name for a in nested] == ["third", "fourth"]
        assert nested[1].deps == ["fifth"]

    def test_none_and_empty(self):
        assert parse_associations(None) == []
        assert parse_associations([]) == []

    def test_association_passthrough(self):
        node = Association("comments", ["author"])
        assert parse_associations([node]) == [node]

    def test_string_dependency_is_wrapped(self):
        (assoc,) = parse_associations([{"nested": "deeplyNested"}])
        assert assoc.deps == ["deeplyNested"]

    def test_multi_key_mapping_uses_first_key(self):
        (assoc,) = parse_associations([{"a": ["x"], "b": ["y"]}])
        assert assoc.name == "a"
        assert assoc.deps == ["x"]

    def test_empty_mapping_skipped(self):
        assert parse_associations([{}, "tags"]) == [Association("tags")]


class TestRelationGraph:
    def test_where_for_registered_parent(self):
        graph = RelationGraph()
        graph.belongs_to("nested", [{"collection": "collection_id"}])
        assert graph.where_for("nested", "collection", 3) == {"collection_id": 3}

    def test_where_for_other_parent_is_empty(self):
        graph = RelationGraph()
        graph.belongs_to("nested", [{"collection": "collection_id"}])
        assert graph.where_for("nested", "other", 3) == {}

    def test_where_for_unregistered_child_is_empty(self):
        assert RelationGraph().where_for("nested", "collection", 1) == {}

    def test_multiple_parents(self):
        graph = RelationGraph()
        graph.belongs_to("comments", [{"posts": "post_id"}, {"users": "author_id"}])
        assert graph.where_for("comments", "posts", 1) == {"post_id": 1}
        assert graph.where_for("comments", "users", 2) == {"author_id": 2}

    def test_last_write_wins(self):
        graph = RelationGraph()
        graph.belongs_to("nested", [{"collection": "collection_id"}])
        graph.belongs_to("nested", [{"other": "other_id"}])
        assert graph.declarations("nested") == [{"other": "other_id"}]
        assert graph.where_for("nested", "collection", 1) == {}

    def test_clear(self):
        graph = RelationGraph()
        graph.belongs_to("nested", [{"collection": "collection_id"}])
        assert "nested" in graph
        graph.clear()
        assert "nested" not in graph
        assert graph.declarations("nested") == []
