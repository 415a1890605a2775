"""End-to-end tests for the click CLI against a temporary data directory."""

import pytest
from click.testing import CliRunner

from orderdesk.infrastructure.bootstrap import build_config
from orderdesk.infrastructure.cli.main import cli
from orderdesk.infrastructure.notifications.background_notifier import (
    BackgroundNotifier,
)
from orderdesk.infrastructure.notifications.logging_notifier import LoggingNotifier


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args: str, input: str | None = None):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args], input=input)

    return _run


@pytest.fixture
def seeded(run):
    assert run("user", "add", "--id", "u1", "--name", "Alice", "--phone", "555-0101").exit_code == 0
    assert run("product", "add", "--name", "Widget", "--price", "5.00", "--stock", "10").exit_code == 0
    assert run("cart", "add", "--user", "u1", "--product", "1", "--quantity", "3").exit_code == 0
    return run


class TestCatalogCommands:

    def test_product_list(self, seeded):
        result = seeded("product", "list")
        assert result.exit_code == 0
        assert "Widget" in result.output
        assert "$5.00" in result.output

    def test_product_update_and_stock(self, seeded):
        assert seeded("product", "update", "--id", "1", "--price", "6.00").exit_code == 0
        assert seeded("product", "stock", "--id", "1", "--quantity", "25").exit_code == 0
        result = seeded("product", "list")
        assert "$6.00" in result.output
        assert "25" in result.output

    def test_unknown_product_reports_error(self, seeded):
        result = seeded("product", "stock", "--id", "9", "--quantity", "1")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_cart_show(self, seeded):
        result = seeded("cart", "show", "--user", "u1")
        assert result.exit_code == 0
        assert "Widget" in result.output

    def test_user_list(self, seeded):
        seeded("user", "add", "--id", "u2", "--name", "Bob")
        result = seeded("user", "list")
        assert result.exit_code == 0
        assert "Alice" in result.output
        assert "555-0101" in result.output
        assert "Bob" in result.output

    def test_user_list_empty(self, run):
        result = run("user", "list")
        assert result.exit_code == 0
        assert "No users found." in result.output


class TestOrderCommands:

    def test_create_show_cancel(self, seeded):
        result = seeded("order", "create", "--user", "u1", "--cart-items", "1")
        assert result.exit_code == 0, result.output
        assert "Order #1 created" in result.output
        assert "$15.00" in result.output

        shown = seeded("order", "show", "--id", "1")
        assert "status=Pending" in shown.output
        assert "555-0101" in shown.output

        canceled = seeded("order", "status", "--id", "1", "--status", "canceled")
        assert canceled.exit_code == 0
        assert "Canceled" in canceled.output

        stock = seeded("product", "list")
        assert " 10" in stock.output

    def test_insufficient_stock(self, seeded):
        seeded("cart", "add", "--user", "u1", "--product", "1", "--quantity", "20")
        result = seeded("order", "create", "--user", "u1", "--cart-items", "2")
        assert result.exit_code == 1
        assert "Insufficient stock for Widget" in result.output

    def test_bad_cart_ids(self, seeded):
        result = seeded("order", "create", "--user", "u1", "--cart-items", "1,x")
        assert result.exit_code == 2
        assert "Invalid cart item ID" in result.output

    def test_invalid_status(self, seeded):
        seeded("order", "create", "--user", "u1", "--cart-items", "1")
        result = seeded("order", "status", "--id", "1", "--status", "Shipped")
        assert result.exit_code == 1
        assert "Valid statuses are" in result.output

    def test_list_and_delete(self, seeded):
        seeded("order", "create", "--user", "u1", "--cart-items", "1")
        assert "Pending" in seeded("order", "list", "--user", "u1").output

        deleted = seeded("order", "delete", "--id", "1", "--yes")
        assert deleted.exit_code == 0
        assert "No orders found." in seeded("order", "list").output

    def test_synchronous_notifications(self, seeded):
        result = seeded(
            "--no-background-notify", "order", "create", "--user", "u1", "--cart-items", "1"
        )
        assert result.exit_code == 0, result.output


class TestConfig:

    def test_background_notifier_is_default(self, tmp_path):
        config = build_config(tmp_path)
        try:
            assert isinstance(config.notifier, BackgroundNotifier)
        finally:
            config.close()

    def test_background_notifier_can_be_disabled(self, tmp_path):
        config = build_config(tmp_path, background_notify=False)
        assert isinstance(config.notifier, LoggingNotifier)
        assert config.data_dir == tmp_path

    def test_command_waits_for_worker_on_exit(self, seeded, monkeypatch):
        closed = []
        original = BackgroundNotifier.shutdown

        def shutdown(self, wait=True):
            closed.append(wait)
            original(self, wait=wait)

        monkeypatch.setattr(BackgroundNotifier, "shutdown", shutdown)
        result = seeded("order", "create", "--user", "u1", "--cart-items", "1")

        assert result.exit_code == 0, result.output
        assert closed == [True]
