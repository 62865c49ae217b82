"""Smoke tests for the click command-line surface."""

from click.testing import CliRunner

from recordshop.application.catalog_service import CatalogService
from recordshop.application.order_service import OrderService
from recordshop.infrastructure.bootstrap import Services
from recordshop.infrastructure.cli.main import cli
from tests.fakes import (
    FakeListingCache,
    FakeOrderRepository,
    FakeRecordRepository,
    FakeTracklistProvider,
)


def _setup():
    record_repo = FakeRecordRepository()
    services = Services(
        catalog=CatalogService(
            record_repo,
            FakeListingCache(),
            FakeTracklistProvider({"mbid-1": ["Side A", "Side B"]}),
        ),
        orders=OrderService(record_repo, FakeOrderRepository()),
    )
    return CliRunner(), services, record_repo


def _add(runner, services, quantity="10"):
    return runner.invoke(
        cli,
        [
            "record", "add",
            "--artist", "The Beatles",
            "--album", "Abbey Road",
            "--price", "25",
            "--quantity", quantity,
            "--format", "vinyl",
            "--category", "rock",
            "--mbid", "mbid-1",
        ],
        obj=services,
    )


class TestRecordCommands:

    def test_add_and_show(self):
        runner, services, _ = _setup()

        added = _add(runner, services)
        shown = runner.invoke(cli, ["record", "show", "--id", "1"], obj=services)

        assert added.exit_code == 0, added.output
        assert "Record created successfully" in added.output
        assert shown.exit_code == 0
        assert "The Beatles - Abbey Road" in shown.output
        assert "Side B" in shown.output

    def test_list_and_empty_list(self):
        runner, services, _ = _setup()
        empty = runner.invoke(cli, ["record", "list", "--artist", "nobody"], obj=services)
        _add(runner, services)
        listed = runner.invoke(cli, ["record", "list", "--q", "abbey"], obj=services)

        assert "No records found." in empty.output
        assert "Abbey Road" in listed.output
        assert "Page 1/1" in listed.output

    def test_stock_adjustment_and_insufficient_stock(self):
        runner, services, record_repo = _setup()
        _add(runner, services, quantity="10")

        ok = runner.invoke(cli, ["record", "stock", "--id", "1", "--delta", "-5"], obj=services)
        too_many = runner.invoke(
            cli, ["record", "stock", "--id", "1", "--delta", "-20"], obj=services
        )

        assert "Stock for 1 is now 5" in ok.output
        assert too_many.exit_code != 0
        assert "Insufficient stock" in too_many.output
        assert record_repo.get_by_id("1").quantity == 5

    def test_update_unknown_format_rejected(self):
        runner, services, _ = _setup()
        _add(runner, services)
        result = runner.invoke(
            cli, ["record", "update", "--id", "1", "--format", "8-track"], obj=services
        )
        assert result.exit_code != 0
        assert "Unknown record format" in result.output

    def test_show_missing_record(self):
        runner, services, _ = _setup()
        result = runner.invoke(cli, ["record", "show", "--id", "nope"], obj=services)
        assert result.exit_code != 0
        assert "not found" in result.output


class TestOrderCommands:

    def test_place_and_list(self):
        runner, services, record_repo = _setup()
        _add(runner, services, quantity="3")

        placed = runner.invoke(
            cli, ["order", "place", "--record", "1", "--quantity", "2"], obj=services
        )
        listed = runner.invoke(cli, ["order", "list"], obj=services)

        assert placed.exit_code == 0, placed.output
        assert "2 x $25.00 = $50.00" in placed.output
        assert "$50.00" in listed.output
        assert record_repo.get_by_id("1").quantity == 1
