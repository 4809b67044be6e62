from locomotive_api.app.infrastructure.persistence.inmemory.in_memory_locomotive_repository import (
    InMemoryLocomotiveRepository,
)
from locomotive_api.app.infrastructure.persistence.inmemory.seed import DEMO_LOCOMOTIVES


def test_first_add_gets_id_1(repository):
    created = repository.add({"series": "NS 1300", "category": "Elektrisch"})
    assert created.id == 1
    assert repository.count() == 1


def test_ids_strictly_increase_even_after_deletes(repository):
    issued = []
    for n in range(3):
        issued.append(repository.add({"series": f"S{n}", "category": "C"}).id)
    repository.remove(issued[-1])
    repository.remove(issued[0])
    issued.append(repository.add({"series": "S3", "category": "C"}).id)
    issued.append(repository.add({"series": "S4", "category": "C"}).id)
    assert issued == [1, 2, 3, 4, 5]


def test_list_all_preserves_insertion_order_across_updates(repository):
    for name in ("A", "B", "C"):
        repository.add({"series": name, "category": "C"})
    repository.update(1, {"series": "A2"})
    assert [r.series for r in repository.list_all()] == ["A2", "B", "C"]


def test_get_by_id_accepts_string_ids(repository):
    created = repository.add({"series": "NS 1300", "category": "Elektrisch"})
    assert repository.get_by_id(str(created.id)) == created
    assert repository.get_by_id("not-a-number") is None
    assert repository.get_by_id(42) is None


def test_partial_update_keeps_absent_fields(repository):
    created = repository.add({"series": "NS 1100", "category": "Elektrisch", "max_speed": 130})
    updated = repository.update(created.id, {"traction_code": "D"})
    assert updated.traction_code == "D"
    assert updated.max_speed == 130


def test_update_never_changes_id(repository):
    created = repository.add({"series": "X", "category": "Y"})
    updated = repository.update(created.id, {"id": 500, "series": "Z"})
    assert updated.id == created.id
    assert repository.get_by_id(500) is None


def test_update_unknown_id_does_not_upsert(repository):
    assert repository.update(999, {"series": "X"}) is None
    assert repository.count() == 0


def test_remove_then_get_returns_none(repository):
    created = repository.add({"series": "X", "category": "Y"})
    removed = repository.remove(created.id)
    assert removed == created
    assert repository.get_by_id(created.id) is None
    assert repository.remove(created.id) is None


def test_returned_records_are_snapshots(repository):
    created = repository.add({"series": "X", "category": "Y"})
    created.series = "mutated"
    listed = repository.list_all()
    listed[0].max_speed = 999
    fetched = repository.get_by_id(created.id)
    assert fetched.series == "X"
    assert fetched.max_speed == 0


def test_seed_keeps_ids_and_continues_after_highest():
    repo = InMemoryLocomotiveRepository(DEMO_LOCOMOTIVES)
    assert repo.count() == len(DEMO_LOCOMOTIVES)
    assert repo.get_by_id(5).series == "NS 2200"
    assert repo.add({"series": "NS 1300", "category": "Elektrisch"}).id == 8


def test_end_to_end_scenario(repository):
    created = repository.add({"series": "NS 1300", "category": "Elektrisch"})
    assert created.id == 1
    assert repository.get_by_id(1) == created

    updated = repository.update(1, {"max_speed": 140})
    assert updated.max_speed == 140

    removed = repository.remove(1)
    assert removed.id == 1
    assert removed.max_speed == 140

    assert repository.get_by_id(1) is None
    assert repository.update(999, {"series": "X"}) is None
