class TestScopes:
    def test_categories_ordered_by_position(self, repository):
        assert [c["id"] for c in repository.list_categories()] == [2, 1]

    def test_get_category(self, repository):
        assert repository.get_category(1)["name"] == "शब्दकोश"
        assert repository.get_category(42) is None

    def test_subcategories_ordered_by_position(self, repository):
        assert [s["id"] for s in repository.list_subcategories(1)] == [11, 10]

    def test_get_subcategory_requires_matching_parent(self, repository):
        assert repository.get_subcategory(1, 10)["name"] == "क्रिया"
        assert repository.get_subcategory(2, 10) is None

    def test_orphan_subcategory_not_stored(self, repository):
        assert repository.get_subcategory(99, 30) is None


class TestContentFetch:
    def test_fetch_by_subcategory_returns_full_scope(self, repository):
        rows = repository.fetch_contents_by_subcategory(10)

        assert sorted(r["id"] for r in rows) == [1, 2, 3, 4]
        assert set(rows[0]) == {
            "id", "sequenceNo", "hindiWord", "englishWord", "hinglishWord", "meaning",
            "extra", "structure", "search", "youtubeLink", "image", "createdAt",
        }

    def test_fetch_by_category_spans_subcategories(self, repository):
        rows = repository.fetch_contents_by_category(1)

        assert sorted(r["id"] for r in rows) == [1, 2, 3, 4, 5, 6, 7]
        assert repository.fetch_contents_by_category(2) == []

    def test_fetch_all(self, repository):
        assert len(repository.fetch_all_contents()) == 7


class TestSearch:
    def test_matches_any_text_field(self, repository):
        assert sorted(r["id"] for r in repository.search_contents("goes")) == [2, 4]
        assert [r["id"] for r in repository.search_contents("forgiveness")] == [5]

    def test_is_case_insensitive_for_latin(self, repository):
        assert [r["id"] for r in repository.search_contents("LOTUS")] == [6]

    def test_wildcards_are_literal(self, repository):
        assert [r["id"] for r in repository.search_contents("_")] == [7]
        assert [r["id"] for r in repository.search_contents("100%")] == [7]
        assert repository.search_contents("%%%") == []

    def test_devanagari_substring(self, repository):
        assert sorted(r["id"] for r in repository.search_contents("क")) == [5, 6]
