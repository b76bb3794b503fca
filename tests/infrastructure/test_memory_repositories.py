"""Tests for the in-memory registries."""

from shop.infrastructure.memory.memory_component_repository import (
    InMemoryComponentRepository,
)
from shop.infrastructure.memory.memory_computer_repository import (
    InMemoryComputerRepository,
)
from shop.infrastructure.memory.memory_peripheral_repository import (
    InMemoryPeripheralRepository,
)
from tests.builders import make_component, make_computer, make_peripheral


class TestInMemoryComputerRepository:

    def test_save_and_get(self):
        repo = InMemoryComputerRepository()
        computer = make_computer(3)
        repo.save(computer)
        assert repo.get_by_id(3) is computer
        assert repo.get_by_id(4) is None

    def test_remove_returns_computer(self):
        computer = make_computer(3)
        repo = InMemoryComputerRepository([computer])
        assert repo.remove(3) is computer
        assert repo.remove(3) is None
        assert repo.list_all() == []


class TestInMemoryComponentRepository:

    def test_save_and_get(self):
        repo = InMemoryComponentRepository()
        component = make_component(10)
        repo.save(component)
        assert repo.get_by_id(10) is component
        assert repo.get_by_id(11) is None

    def test_remove(self):
        repo = InMemoryComponentRepository()
        component = make_component(10)
        repo.save(component)
        assert repo.remove(10) is component
        assert repo.remove(10) is None

    def test_list_in_registration_order(self):
        repo = InMemoryComponentRepository()
        repo.save(make_component(12))
        repo.save(make_component(10))
        assert [c.id for c in repo.list_all()] == [12, 10]


class TestInMemoryPeripheralRepository:

    def test_save_list_remove(self):
        repo = InMemoryPeripheralRepository()
        peripheral = make_peripheral(100)
        repo.save(peripheral)
        assert repo.list_all() == [peripheral]
        assert repo.remove(100) is peripheral
        assert repo.list_all() == []
