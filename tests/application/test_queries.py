"""Tests for the catalog-facing handlers and the session wiring."""

import pytest

from pharmacare.application.add_to_cart import AddToCartHandler
from pharmacare.application.browse_catalog import BrowseCatalogHandler
from pharmacare.application.cart_store import CartStore
from pharmacare.application.session import ShopSession
from pharmacare.application.show_cart import ShowCartHandler
from pharmacare.application.show_favorites import ShowFavoritesHandler
from pharmacare.application.toggle_favorite import ToggleFavoriteHandler
from pharmacare.domain.exceptions import EntityNotFoundError, ValidationError
from tests.fakes import FakeLocalStorage, FakeProductRepository, RecordingNotifier, make_product


def _catalog() -> FakeProductRepository:
    return FakeProductRepository([
        make_product("1", "Panadol Extra", "45.00", "medicaments"),
        make_product("2", "Crème Solaire SPF 50+", "125.00", "cosmetiques"),
        make_product("3", "Tisanes Détox Bio", "65.00", "bio"),
    ])


def _session() -> tuple[ShopSession, FakeLocalStorage, RecordingNotifier]:
    storage = FakeLocalStorage()
    notifier = RecordingNotifier()
    return ShopSession.start(storage, notifier), storage, notifier


class TestAddToCartHandler:

    def test_resolves_product(self):
        session, _, _ = _session()
        AddToCartHandler(_catalog(), session.cart).handle("2", 2)
        assert session.cart.items[0].product.name == "Crème Solaire SPF 50+"
        assert session.cart.get_total_items() == 2

    def test_unknown_product_rejected(self):
        session, _, notifier = _session()
        with pytest.raises(EntityNotFoundError, match="not found"):
            AddToCartHandler(_catalog(), session.cart).handle("99")
        assert session.cart.items == []
        assert notifier.sent == []

    def test_zero_quantity_rejected(self):
        session, _, _ = _session()
        with pytest.raises(ValidationError, match="must be positive"):
            AddToCartHandler(_catalog(), session.cart).handle("1", 0)


class TestShowCartHandler:

    def test_formats_lines_and_totals(self):
        store = CartStore(RecordingNotifier())
        catalog = _catalog()
        store.add_to_cart(catalog.get_by_id("1"), 2)
        store.add_to_cart(catalog.get_by_id("2"))

        dto = ShowCartHandler(store).handle()

        assert [l.product_id for l in dto.lines] == ["1", "2"]
        assert dto.lines[0].unit_price == "45,00 DH"
        assert dto.lines[0].line_total == "90,00 DH"
        assert dto.total_items == 3
        assert dto.total_price == "215,00 DH"


class TestShowFavoritesHandler:

    def test_lists_in_catalog_order_and_skips_unknown(self):
        session, _, _ = _session()
        for product_id in ("3", "gone", "1"):
            session.favorites.add_to_favorites(product_id)

        dtos = ShowFavoritesHandler(session.favorites, _catalog()).handle()

        assert [d.id for d in dtos] == ["1", "3"]
        assert session.favorites.get_favorites_count() == 3


class TestToggleFavoriteHandler:

    def test_names_known_product(self):
        session, _, notifier = _session()
        assert ToggleFavoriteHandler(_catalog(), session.favorites).handle("1") is True
        assert notifier.sent[0].description == "Panadol Extra ajouté à vos favoris"

    def test_unknown_product_uses_generic_text(self):
        session, _, notifier = _session()
        ToggleFavoriteHandler(_catalog(), session.favorites).handle("99")
        assert session.favorites.is_favorite("99")
        assert notifier.sent[0].description == "Produit ajouté à vos favoris"


class TestBrowseCatalogHandler:

    def test_lists_everything(self):
        assert len(BrowseCatalogHandler(_catalog()).handle()) == 3

    def test_filters_by_category(self):
        dtos = BrowseCatalogHandler(_catalog()).handle(category="BIO")
        assert [d.id for d in dtos] == ["3"]

    def test_search_matches_name(self):
        dtos = BrowseCatalogHandler(_catalog()).handle(search="solaire")
        assert [d.id for d in dtos] == ["2"]

    def test_get_unknown_rejected(self):
        with pytest.raises(EntityNotFoundError):
            BrowseCatalogHandler(_catalog()).get("99")


class TestShopSession:

    def test_stores_are_independent(self):
        session, storage, _ = _session()
        session.cart.add_to_cart(make_product())
        assert session.favorites.get_favorites_count() == 0
        assert storage.items == {}

    def test_favorites_hydrated_on_start(self):
        storage = FakeLocalStorage({"pharmaCare_favorites": '["1"]'})
        session = ShopSession.start(storage, RecordingNotifier())
        assert session.favorites.is_favorite("1")
        assert session.cart.items == []
