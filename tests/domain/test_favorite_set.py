"""Unit tests for the FavoriteSet."""

from pharmacare.domain.model.favorites import FavoriteSet


class TestFavoriteSet:

    def test_add_is_idempotent(self):
        favs = FavoriteSet()
        assert favs.add("1") is True
        assert favs.add("1") is False
        assert favs.product_ids == ["1"]

    def test_remove_absent_is_noop(self):
        favs = FavoriteSet(["1"])
        assert favs.remove("2") is False
        assert favs.product_ids == ["1"]

    def test_toggle_round_trip(self):
        favs = FavoriteSet(["1"])
        assert favs.toggle("2") is True
        assert "2" in favs
        assert favs.toggle("2") is False
        assert "2" not in favs
        assert favs.product_ids == ["1"]

    def test_duplicates_collapsed_on_construction(self):
        favs = FavoriteSet(["a", "b", "a"])
        assert favs.product_ids == ["a", "b"]
        assert len(favs) == 2
