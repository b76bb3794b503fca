"""Tests for the text command dispatcher."""

from shop.infrastructure.bootstrap import catalog_controller
from shop.infrastructure.cli.dispatcher import CommandDispatcher


def _dispatcher() -> CommandDispatcher:
    return CommandDispatcher(catalog_controller())


class TestCommands:

    def test_add_computer(self):
        out = _dispatcher().execute("AddComputer DesktopComputer 1 Asus X 500")
        assert out == "Added computer with id: 1."

    def test_add_and_remove_component(self):
        d = _dispatcher()
        d.execute("AddComputer DesktopComputer 1 Asus X 500 10")
        assert d.execute("AddComponent 1 10 CentralProcessingUnit Intel i9 200 5 9") == (
            "Added component CentralProcessingUnit with id 10 in computer with id 1."
        )
        assert d.execute("RemoveComponent CentralProcessingUnit 1") == (
            "Removed component CentralProcessingUnit with id 10."
        )

    def test_add_and_remove_peripheral(self):
        d = _dispatcher()
        d.execute("AddComputer Laptop 1 Dell XPS 1000")
        assert d.execute("AddPeripheral 1 100 Mouse Razer Viper 50 4 USB") == (
            "Added peripheral Mouse with id 100 in computer with id 1."
        )
        assert d.execute("RemovePeripheral Mouse 1") == "Removed peripheral Mouse with id 100."

    def test_get_computer_data(self):
        d = _dispatcher()
        d.execute("AddComputer DesktopComputer 1 Asus X 500 10")
        d.execute("AddComponent 1 10 CentralProcessingUnit Intel i9 200 5 9")
        assert d.execute("GetComputerData 1") == (
            "Overall Performance: 15.00. Price: 700.00 - DesktopComputer: Asus X (Id: 1)\n"
            " Components (1):\n"
            "  Overall Performance: 5.00. Price: 200.00 - "
            "CentralProcessingUnit: Intel i9 (Id: 10) Generation: 9\n"
            " Peripherals (0); Average Overall Performance (0.00):"
        )

    def test_buy_best_and_buy(self):
        d = _dispatcher()
        d.execute("AddComputer DesktopComputer 1 Asus X 500 10")
        d.execute("AddComputer DesktopComputer 2 Asus Y 300 20")
        assert "(Id: 2)" in d.execute("BuyBest 600")
        assert "(Id: 1)" in d.execute("BuyComputer 1")
        assert d.execute("GetComputerData 1") == "Computer with this id does not exist."

    def test_list_computers(self):
        d = _dispatcher()
        assert d.execute("ListComputers") == "No computers registered."
        d.execute("AddComputer Laptop 4 Dell XPS 1000")
        d.execute("AddComputer Laptop 2 HP Envy 800")
        assert d.execute("ListComputers").splitlines() == [
            "Overall Performance: 10.00. Price: 1000.00 - Laptop: Dell XPS (Id: 4)",
            "Overall Performance: 10.00. Price: 800.00 - Laptop: HP Envy (Id: 2)",
        ]


class TestErrorsAreReported:

    def test_domain_error_message(self):
        d = _dispatcher()
        assert d.execute("AddComputer Tablet 1 Apple iPad 800") == "Computer type is invalid."

    def test_not_found_message(self):
        d = _dispatcher()
        d.execute("AddComputer Laptop 1 Dell XPS 1000")
        assert d.execute("RemoveComponent Motherboard 1") == (
            "Component Motherboard does not exist in Laptop with Id 1."
        )

    def test_budget_message(self):
        d = _dispatcher()
        assert d.execute("BuyBest 100") == "Can't buy a computer with a budget of $100.00."

    def test_wrong_argument_count(self):
        assert _dispatcher().execute("BuyComputer") == "Invalid arguments for BuyComputer."

    def test_non_numeric_id(self):
        assert _dispatcher().execute("GetComputerData one") == (
            "Invalid arguments for GetComputerData."
        )

    def test_non_numeric_price(self):
        assert _dispatcher().execute("AddComputer DesktopComputer 1 Asus X abc") == (
            "Invalid arguments for AddComputer."
        )

    def test_non_numeric_part_price(self):
        d = _dispatcher()
        d.execute("AddComputer Laptop 1 Dell XPS 1000")
        assert d.execute("AddComponent 1 10 Motherboard Asus Z cheap 5 9") == (
            "Invalid arguments for AddComponent."
        )
        assert d.execute("AddPeripheral 1 100 Mouse Razer Viper NaN 4 USB") == (
            "Invalid arguments for AddPeripheral."
        )
        assert d.execute("GetComputerData 1").startswith(
            "Overall Performance: 10.00. Price: 1000.00 "
        )

    def test_non_numeric_budget(self):
        assert _dispatcher().execute("BuyBest lots") == "Invalid arguments for BuyBest."

    def test_negative_budget(self):
        d = _dispatcher()
        d.execute("AddComputer Laptop 1 Dell XPS 1000")
        assert d.execute("BuyBest -1") == "Can't buy a computer with a budget of $-1.00."

    def test_unknown_command(self):
        assert _dispatcher().execute("Explode 1") == "Unknown command: Explode."


class TestRun:

    def test_stops_at_close_and_skips_blank_lines(self):
        lines = [
            "AddComputer Laptop 1 Dell XPS 1000\n",
            "\n",
            "Close\n",
            "AddComputer Laptop 2 Dell XPS 1000\n",
        ]
        assert _dispatcher().run(lines) == ["Added computer with id: 1."]

    def test_continues_after_error(self):
        lines = ["GetComputerData 5", "AddComputer Laptop 5 Dell XPS 1000"]
        assert _dispatcher().run(lines) == [
            "Computer with this id does not exist.",
            "Added computer with id: 5.",
        ]
