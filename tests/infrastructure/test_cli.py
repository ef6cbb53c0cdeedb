"""End-to-end tests for the click commands and the composition root."""

from urllib.parse import unquote

import click
import pytest
from click.testing import CliRunner

from printshop.domain.model.channel import ChannelSettings
from printshop.infrastructure.bootstrap import load_settings, order_id_prefix
from printshop.infrastructure.cli.main import cli
from printshop.infrastructure.cli.selection import parse_selections

CUSTOMER_ARGS = ["--name", "Alice", "--email", "alice@example.com", "--mobile", "9876543210"]


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestCatalogCommands:

    def test_list(self, runner):
        result = runner.invoke(cli, ["catalog", "list"])
        assert result.exit_code == 0
        assert "Matt lamination UV coated Cards" in result.output
        assert "1100" in result.output

    def test_quote(self, runner):
        result = runner.invoke(
            cli, ["catalog", "quote", "--item", "1:1000", "--item", "2:3000", "--double-side", "2"]
        )
        assert result.exit_code == 0
        assert "1200 Rs" in result.output
        assert "1470 Rs" in result.output

    def test_quote_rejects_bad_quantity(self, runner):
        result = runner.invoke(cli, ["catalog", "quote", "--item", "1:abc"])
        assert result.exit_code == 1
        assert "Invalid quantity" in result.output

    def test_quote_rejects_bad_format(self, runner):
        result = runner.invoke(cli, ["catalog", "quote", "--item", "1-1000"])
        assert result.exit_code == 2
        assert "Expected 'ID:QTY'" in result.output


class TestOrderSubmit:

    def test_prints_both_links(self, runner):
        result = runner.invoke(cli, ["order", "submit", "--item", "1:2000", *CUSTOMER_ARGS])
        assert result.exit_code == 0
        assert "Order placed successfully!" in result.output
        assert "mailto:info@businessmarts.site?subject=" in result.output
        assert "https://wa.me/9599270456?text=" in result.output

    def test_single_channel_alias(self, runner):
        result = runner.invoke(
            cli, ["order", "submit", "--item", "1:2000", "--channel", "whatsapp", *CUSTOMER_ARGS]
        )
        assert result.exit_code == 0
        assert "https://wa.me/" in result.output
        assert "mailto:" not in result.output

    def test_show_transcript(self, runner):
        result = runner.invoke(
            cli, ["order", "submit", "--item", "1:2000", "--show-transcript", *CUSTOMER_ARGS]
        )
        assert result.exit_code == 0
        assert "=== ORDER DETAILS ===" in result.output
        assert "PRICE: 540 Rs" in result.output

    def test_empty_order_rejected(self, runner):
        result = runner.invoke(cli, ["order", "submit", *CUSTOMER_ARGS])
        assert result.exit_code == 1
        assert "No products selected" in result.output
        assert result.output.count("Please add at least one product") == 1
        assert "Error:" not in result.output
        assert "Product" not in result.output
        assert "0 Rs" not in result.output

    def test_customer_from_environment(self, runner):
        result = runner.invoke(
            cli,
            ["order", "submit", "--item", "3:1000", "--channel", "email"],
            env={
                "PRINTSHOP_CUSTOMER_NAME": "Bob",
                "PRINTSHOP_CUSTOMER_EMAIL": "bob@example.com",
                "PRINTSHOP_CUSTOMER_MOBILE": "123",
            },
        )
        assert result.exit_code == 0
        link = [line for line in result.output.splitlines() if line.startswith("mailto:")][0]
        assert "NAME: Bob" in unquote(link)

    def test_open_launches_link(self, runner, monkeypatch):
        launched: list[str] = []
        monkeypatch.setattr(click, "launch", lambda url: launched.append(url))
        result = runner.invoke(
            cli, ["order", "submit", "--item", "1:1000", "--channel", "email", "--open", *CUSTOMER_ARGS]
        )
        assert result.exit_code == 0
        assert len(launched) == 1
        assert launched[0].startswith("mailto:")


class TestParseSelections:

    def test_double_side_applied_to_item(self):
        selections = parse_selections(("1:1000", "4:2000"), ("4",))
        assert [(s.item_id, s.quantity, s.double_side) for s in selections] == [
            ("1", "1000", False),
            ("4", "2000", True),
        ]

    def test_double_side_without_item(self):
        selections = parse_selections((), ("5",))
        assert selections[0].item_id == "5"
        assert selections[0].quantity == 0
        assert selections[0].double_side is True


class TestBootstrap:

    def test_defaults(self):
        assert load_settings({}) == ChannelSettings()
        assert order_id_prefix({}) == "BM"

    def test_environment_overrides(self):
        settings = load_settings({
            "PRINTSHOP_ORDER_EMAIL": "orders@example.com",
            "PRINTSHOP_MESSAGING_NUMBER": "111",
        })
        assert settings.email_recipient == "orders@example.com"
        assert settings.messaging_number == "111"
        assert settings.messaging_url == "https://wa.me"
        assert order_id_prefix({"PRINTSHOP_ORDER_ID_PREFIX": "ZZ"}) == "ZZ"
