"""Unit tests for InMemoryItemStore.

Tests cover:
- Id assignment (sequential, never reused)
- Secret generation and preservation across updates
- Absent-signal outcomes (None / False) for unknown ids
- Insertion order of list()
- Atomicity under concurrent creates
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from itemflow.domain.entities import Item
from itemflow.infrastructure.persistence import InMemoryItemStore


@pytest.fixture
def item_store() -> InMemoryItemStore:
    return InMemoryItemStore()


@pytest.mark.unit
class TestItemStoreCreate:
    """Test create()."""

    def test_assigns_sequential_ids(self, item_store):
        first = item_store.create("Widget")
        second = item_store.create("Gadget", "Shiny")

        assert first == Item(
            id=1, name="Widget", description=None, internal_secret="secret-1"
        )
        assert second.id == 2
        assert second.description == "Shiny"

    def test_ids_are_never_reused_after_remove(self, item_store):
        item_store.create("Widget")
        item_store.remove(1)

        assert item_store.create("Gadget").id == 2

    def test_secret_is_generated_from_id(self, item_store):
        item = item_store.create("Widget")

        assert item.internal_secret == "secret-1"


@pytest.mark.unit
class TestItemStoreRead:
    """Test list() and get()."""

    def test_list_returns_insertion_order(self, item_store):
        item_store.create("A")
        item_store.create("B")
        item_store.create("C")

        assert [item.name for item in item_store.list()] == ["A", "B", "C"]

    def test_list_keeps_position_after_update(self, item_store):
        item_store.create("A")
        item_store.create("B")
        item_store.update(1, "A2")

        assert [item.name for item in item_store.list()] == ["A2", "B"]

    def test_list_returns_snapshot(self, item_store):
        item_store.create("A")
        snapshot = item_store.list()
        item_store.create("B")

        assert len(snapshot) == 1

    def test_get_unknown_returns_none(self, item_store):
        assert item_store.get(99) is None

    def test_get_returns_stored_item(self, item_store):
        created = item_store.create("Widget")

        assert item_store.get(created.id) is created


@pytest.mark.unit
class TestItemStoreUpdate:
    """Test update()."""

    def test_update_preserves_id_and_secret(self, item_store):
        created = item_store.create("Widget", "old")

        updated = item_store.update(created.id, "Widget2")

        assert updated == Item(
            id=1, name="Widget2", description=None, internal_secret="secret-1"
        )
        assert item_store.get(1) == updated

    def test_secret_survives_many_updates(self, item_store):
        created = item_store.create("Widget")

        for n in range(5):
            item_store.update(created.id, f"Widget{n}", f"rev {n}")

        assert item_store.get(created.id).internal_secret == created.internal_secret

    def test_update_unknown_returns_none_without_change(self, item_store):
        item_store.create("Widget")

        assert item_store.update(42, "Ghost") is None
        assert len(item_store) == 1
        assert item_store.get(42) is None


@pytest.mark.unit
class TestItemStoreRemove:
    """Test remove()."""

    def test_remove_twice(self, item_store):
        item_store.create("Widget")

        assert item_store.remove(1) is True
        assert item_store.remove(1) is False
        assert item_store.get(1) is None

    def test_remove_unknown_is_noop(self, item_store):
        item_store.create("Widget")

        assert item_store.remove(7) is False
        assert len(item_store) == 1


@pytest.mark.unit
class TestItemStoreConcurrency:
    """Test atomicity of concurrent operations."""

    def test_concurrent_creates_get_unique_ids(self, item_store):
        with ThreadPoolExecutor(max_workers=8) as pool:
            items = list(pool.map(lambda n: item_store.create(f"item-{n}"), range(200)))

        ids = sorted(item.id for item in items)
        assert ids == list(range(1, 201))
        assert len(item_store) == 200

    def test_listed_ids_were_created_and_not_removed(self, item_store):
        created = [item_store.create(f"item-{n}") for n in range(10)]
        removed = {item.id for item in created[::3]}
        for item_id in removed:
            item_store.remove(item_id)

        listed = {item.id for item in item_store.list()}
        assert listed == {item.id for item in created} - removed


@pytest.mark.unit
class TestItemStoreLogging:
    """Test mutation logging."""

    def test_mutations_logged_at_debug(self, recording_logger):
        item_store = InMemoryItemStore(logger=recording_logger)

        item_store.create("Widget")
        item_store.update(1, "Widget2")
        item_store.remove(1)
        item_store.remove(1)

        assert [record[:2] for record in recording_logger.records] == [
            ("debug", "Item created"),
            ("debug", "Item updated"),
            ("debug", "Item removed"),
        ]
