import threading

from transit_line.adapters.repository import (
    InMemoryLineRepository,
    InMemoryStationRepository,
)
from transit_line.domain.line import Line
from transit_line.domain.models import Station


def test_station_repository_roundtrip():
    repository = InMemoryStationRepository()
    repository.save(Station(12, "Singal"))
    repository.save(Station(11, "Giheung"))

    assert repository.get(11).name == "Giheung"
    assert repository.get(99) is None
    assert [s.id for s in repository.list_stations()] == [11, 12]
    assert repository.size() == 2


def test_station_save_replaces_same_id():
    repository = InMemoryStationRepository()
    repository.save(Station(11, "Giheung"))
    repository.save(Station(11, "Giheung (renamed)"))

    assert repository.size() == 1
    assert repository.get(11).name == "Giheung (renamed)"


def test_line_repository_crud():
    repository = InMemoryLineRepository()
    line = repository.save(Line(repository.next_id(), "Bundang", "yellow"))

    assert repository.get(line.id) is line
    assert repository.find_by_name("Bundang") is line
    assert repository.find_by_name("Everline") is None
    assert repository.delete(line.id)
    assert not repository.delete(line.id)
    assert repository.list_lines() == []


def test_next_id_skips_ids_in_use():
    repository = InMemoryLineRepository()
    repository.save(Line(1, "Bundang", "yellow"))
    repository.save(Line(2, "Everline", "green"))

    assert repository.next_id() == 3
    assert repository.next_id() == 4


def test_list_lines_ordered_by_id():
    repository = InMemoryLineRepository()
    for line_id in (5, 2, 9):
        repository.save(Line(line_id, f"L{line_id}", "red"))

    assert [line.id for line in repository.list_lines()] == [2, 5, 9]


def test_next_id_is_unique_across_threads():
    repository = InMemoryLineRepository()
    ids: list[int] = []
    lock = threading.Lock()

    def worker():
        for _ in range(50):
            new_id = repository.next_id()
            with lock:
                ids.append(new_id)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(ids) == len(set(ids)) == 200
