"""Integration tests for the BuyComputer, BuyBestComputer and query use cases."""

import pytest

from shop.domain.exceptions import BudgetExceededError, UnknownComputerError, ValidationError
from tests.builders import setup_shop


def _setup():
    shop = setup_shop()
    shop.controller.add_computer("DesktopComputer", 1, "Asus", "X", 500, 10)
    shop.controller.add_computer("Laptop", 2, "HP", "Envy", 300, 20)
    return shop


class TestBuyComputer:

    def test_returns_full_description(self):
        shop = _setup()
        shop.controller.add_component(1, 10, "VideoCard", "Nvidia", "4090", 1600, 50, 4)
        dto = shop.controller.buy_computer(1)
        assert dto.description.startswith(
            "Overall Performance: 60.00. Price: 2100.00 - DesktopComputer: Asus X (Id: 1)"
        )
        assert dto.component_count == 1

    def test_computer_is_gone_afterwards(self):
        shop = _setup()
        shop.controller.buy_computer(1)
        with pytest.raises(UnknownComputerError):
            shop.controller.get_computer_data(1)
        assert [c.id for c in shop.controller.list_computers()] == [2]

    def test_attached_parts_leave_the_registries(self):
        shop = _setup()
        shop.controller.add_component(1, 10, "VideoCard", "Nvidia", "4090", 1600, 50, 4)
        shop.controller.add_peripheral(1, 100, "Monitor", "LG", "27GP", 300, 8, "HDMI")
        shop.controller.add_peripheral(2, 200, "Mouse", "Razer", "Viper", 50, 2, "USB")

        shop.controller.buy_computer(1)

        assert shop.components.list_all() == []
        assert [p.id for p in shop.peripherals.list_all()] == [200]

    def test_unknown_id(self):
        shop = _setup()
        with pytest.raises(UnknownComputerError):
            shop.controller.buy_computer(3)

    def test_cannot_buy_twice(self):
        shop = _setup()
        shop.controller.buy_computer(2)
        with pytest.raises(UnknownComputerError):
            shop.controller.buy_computer(2)


class TestBuyBestComputer:

    def test_scenario_best_within_budget(self):
        shop = _setup()
        assert shop.controller.buy_best_computer(600).id == 2

    def test_is_only_a_query(self):
        shop = _setup()
        shop.controller.buy_best_computer(600)
        assert len(shop.controller.list_computers()) == 2

    def test_never_exceeds_budget(self):
        shop = _setup()
        dto = shop.controller.buy_best_computer("300")
        assert dto.id == 2
        assert float(dto.price) <= 300

    def test_budget_too_small(self):
        shop = _setup()
        with pytest.raises(BudgetExceededError, match=r"Can't buy a computer with a budget of \$299\.50"):
            shop.controller.buy_best_computer(299.5)

    def test_negative_budget_buys_nothing(self):
        shop = _setup()
        with pytest.raises(BudgetExceededError, match=r"budget of \$-1\.00\."):
            shop.controller.buy_best_computer(-1)

    def test_non_numeric_budget_rejected(self):
        shop = _setup()
        with pytest.raises(ValidationError, match="Invalid budget"):
            shop.controller.buy_best_computer("lots")


class TestGetComputerData:

    def test_matches_describe(self):
        shop = _setup()
        dto = shop.controller.get_computer_data(2)
        assert dto.description == shop.computers.get_by_id(2).describe()
        assert (dto.kind, dto.manufacturer, dto.model) == ("Laptop", "HP", "Envy")

    def test_unknown_id(self):
        shop = _setup()
        with pytest.raises(UnknownComputerError, match="does not exist"):
            shop.controller.get_computer_data(99)
