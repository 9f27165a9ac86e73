"""End-to-end CLI tests with the backend session replaced by fakes."""

import asyncio
from contextlib import asynccontextmanager

import httpx
import pytest
from click.testing import CliRunner

from storefront.domain.model.account import UserRole
from storefront.infrastructure import bootstrap
from storefront.infrastructure.bootstrap import Storefront
from storefront.infrastructure.cli.main import cli
from storefront.infrastructure.rpc.client import RpcClient
from tests.fakes import (
    FakeAccountRepository,
    FakeCartRepository,
    FakeOrderRepository,
    FakeProductRepository,
    make_product,
)

CHECKOUT_ARGS = [
    "checkout",
    "--name", "Asha Rao",
    "--phone", "9876543210",
    "--address", "12 MG Road",
    "--city", "Bengaluru",
    "--state", "Karnataka",
    "--pincode", "560001",
]


@pytest.fixture
def backend(monkeypatch):
    """Fake repositories served to every command through open_storefront."""
    products = FakeProductRepository([make_product(1, title="Widget", price=500, stock=10)])
    cart = FakeCartRepository({1: 2})
    orders = FakeOrderRepository(cart, products)
    account = FakeAccountRepository(role=UserRole.USER)

    @asynccontextmanager
    async def fake_open(settings):
        yield Storefront(products=products, cart=cart, orders=orders, account=account)

    monkeypatch.setattr(bootstrap, "open_storefront", fake_open)
    return Storefront(products=products, cart=cart, orders=orders, account=account)


def _invoke(*args: str):
    return CliRunner().invoke(cli, list(args))


class TestCheckout:

    def test_places_order(self, backend):
        result = _invoke(*CHECKOUT_ARGS, "--country", "India", "--payment", "cod")

        assert result.exit_code == 0, result.output
        assert "Order Summary" in result.output
        assert "Order #1 placed." in result.output
        assert "Confirmation: /order-confirmation/1" in result.output
        assert backend.cart.items == {}

        order = asyncio.run(backend.orders.get_by_id(1))
        assert order.shipping_address == (
            "Asha Rao\n9876543210\n12 MG Road\nBengaluru, Karnataka - 560001\nIndia"
        )

    def test_rejects_other_countries(self, backend):
        result = _invoke(*CHECKOUT_ARGS, "--country", "Nepal", "--payment", "cod")

        assert result.exit_code == 1
        assert 'Please enter "India" as your country.' in result.output
        assert "We currently only accept orders from India" in result.output
        assert backend.orders.calls == []
        assert backend.cart.calls == []
        assert backend.products.calls == []
        assert backend.cart.items == {1: 2}

    def test_requires_payment_method(self, backend):
        result = _invoke(*CHECKOUT_ARGS, "--country", "india")

        assert result.exit_code == 1
        assert "Please select a payment method" in result.output
        assert backend.orders.calls == []
        assert backend.cart.calls == []

    def test_empty_cart(self, backend):
        backend.cart.items.clear()
        result = _invoke(*CHECKOUT_ARGS, "--country", "India", "--payment", "cod")

        assert result.exit_code == 1
        assert "Your cart is empty" in result.output

    def test_backend_rejection(self, backend):
        backend.orders.reject_with = "Insufficient stock for Widget"
        result = _invoke(*CHECKOUT_ARGS, "--country", "India", "--payment", "cod")

        assert result.exit_code == 1
        assert "Insufficient stock for Widget" in result.output


class TestCart:

    def test_show(self, backend):
        result = _invoke("cart", "show")
        assert result.exit_code == 0, result.output
        assert "Cart (2 items)" in result.output
        assert "₹10.00" in result.output

    def test_add_clamps_to_stock(self, backend):
        backend.cart.items.clear()
        result = _invoke("cart", "add", "--id", "1", "--qty", "50")
        assert result.exit_code == 0, result.output
        assert "Added to cart (10 x product #1)." in result.output
        assert backend.cart.items == {1: 10}

    def test_add_unknown_product(self, backend):
        result = _invoke("cart", "add", "--id", "99")
        assert result.exit_code == 1
        assert "Product #99 not found" in result.output

    def test_clear(self, backend):
        result = _invoke("cart", "clear")
        assert result.exit_code == 0
        assert "Cart cleared." in result.output
        assert backend.cart.items == {}


class TestAdmin:

    def test_non_admin_denied(self, backend):
        result = _invoke("admin", "products")
        assert result.exit_code == 1
        assert "You don't have permission to access the admin panel." in result.output
        assert backend.products.calls == []

    def test_add_reports_field_errors(self, backend):
        backend.account.role = UserRole.ADMIN
        result = _invoke("admin", "add", "--title", "Lamp", "--price", "abc")

        assert result.exit_code == 1
        assert "price: Price must be a valid number" in result.output
        assert "stock: Stock is required" in result.output
        assert "Please correct the highlighted fields." in result.output
        assert "addProduct" not in backend.products.calls

    def test_add(self, backend):
        backend.account.role = UserRole.ADMIN
        result = _invoke(
            "admin", "add",
            "--title", "Lamp",
            "--description", "Warm light",
            "--price", "19.99",
            "--category", "Home",
            "--image-url", "https://img.example/lamp.png",
            "--stock", "3",
        )

        assert result.exit_code == 0, result.output
        assert "Product #2 added successfully." in result.output
        assert backend.products.stored(2).price.amount == 1999

    def test_update_keeps_omitted_fields(self, backend):
        backend.account.role = UserRole.ADMIN
        result = _invoke("admin", "update", "--id", "1", "--price", "7.50")

        assert result.exit_code == 0, result.output
        updated = backend.products.stored(1)
        assert updated.price.amount == 750
        assert updated.title == "Widget"
        assert updated.stock == 10

    def test_stock(self, backend):
        backend.account.role = UserRole.ADMIN
        result = _invoke("admin", "stock", "--id", "1", "--stock", "0")

        assert result.exit_code == 0, result.output
        assert "Product #1 stock updated to 0." in result.output
        assert backend.products.stored(1).stock == 0


class TestAccount:

    def test_set_name(self, backend):
        result = _invoke("account", "set-name", "--name", "  Asha  ")
        assert result.exit_code == 0, result.output
        assert "Profile saved: Asha" in result.output
        assert backend.account.profile.name == "Asha"


class TestMalformedReplies:

    def test_reported_as_error_not_traceback(self, monkeypatch):
        def handler(request):
            return httpx.Response(200, json={"ok": [{"id": 1, "title": "x"}]})

        real_client = RpcClient

        def mocked_client(settings):
            return real_client(settings, transport=httpx.MockTransport(handler))

        monkeypatch.setattr(bootstrap, "RpcClient", mocked_client)
        result = _invoke("product", "list")

        assert result.exit_code == 1
        assert "Malformed response to listAllProducts" in result.output
        assert not isinstance(result.exception, KeyError)
