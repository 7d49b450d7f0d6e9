from conftest import make_mountain


def test_add_and_list_everest(repo):
    everest = make_mountain()
    assert repo.add_all([everest]) is True
    assert repo.list_all() == [everest]


def test_duplicate_batch_leaves_store_unchanged(repo):
    everest = make_mountain()
    k2 = make_mountain(id=2, name="K2", country="Pakistan", range="Karakoram", altitude=8611)
    assert repo.add_all([everest])

    assert repo.add_all([k2, make_mountain()]) is False
    assert repo.list_all() == [everest]


def test_duplicate_within_batch_is_rejected(repo):
    everest = make_mountain()
    assert repo.add_all([everest, make_mountain()]) is False
    assert repo.list_all() == []


def test_same_id_different_content_is_not_a_duplicate(repo):
    first = make_mountain(id=7, name="Lhotse", altitude=8516)
    second = make_mountain(id=7, name="Makalu", altitude=8485)
    assert repo.add_all([first])
    assert repo.add_all([second])

    assert repo.list_all() == [first, second]
    assert repo.find_by_id(7) == [first]


def test_list_all_preserves_insertion_order_after_delete(repo):
    records = [make_mountain(id=i, name=f"Peak {i}") for i in range(1, 5)]
    repo.add_all(records)

    assert repo.delete(2) is True
    assert [m.id for m in repo.list_all()] == [1, 3, 4]


def test_update_keeps_position(repo):
    records = [make_mountain(id=i, name=f"Peak {i}") for i in range(1, 6)]
    repo.add_all(records)
    renamed = make_mountain(id=3, name="Renamed", altitude=1000)

    assert repo.update(3, renamed) is True
    result = repo.list_all()
    assert [m.id for m in result] == [1, 2, 3, 4, 5]
    assert result[2] == renamed


def test_update_and_delete_missing_id(repo):
    repo.add_all([make_mountain()])
    assert repo.update(99, make_mountain(id=99)) is False
    assert repo.delete(99) is False
    assert len(repo.list_all()) == 1


def test_delete_removes_only_first_match(repo):
    first = make_mountain(id=5, name="A")
    second = make_mountain(id=5, name="B")
    repo.add_all([first, second])

    assert repo.delete(5) is True
    assert repo.list_all() == [second]


def test_filters(repo):
    everest = make_mountain()
    lhotse = make_mountain(id=2, name="Lhotse", altitude=8516)
    k2 = make_mountain(id=3, name="K2", country="Pakistan", range="Karakoram", altitude=8611)
    aconcagua = make_mountain(
        id=4, name="Aconcagua", country="Argentina", range="Andes", altitude=6961, isNorthern=False
    )
    repo.add_all([everest, lhotse, k2, aconcagua])

    assert repo.find_by_country("Nepal") == [everest, lhotse]
    assert repo.find_by_country("nepal") == []
    assert repo.find_by_country_and_range("Pakistan", "Karakoram") == [k2]
    assert repo.find_by_country_and_range("Pakistan", "Himalaya") == []
    assert repo.find_by_hemisphere(False) == [aconcagua]
    assert repo.find_by_hemisphere(True) == [everest, lhotse, k2]
    assert repo.find_by_name("Nepal", "Himalaya", "Lhotse") == [lhotse]
    assert repo.find_by_name("Nepal", "Himalaya", "Lhot") == []


def test_altitude_threshold_is_inclusive(repo):
    everest = make_mountain()
    repo.add_all([everest])

    assert repo.find_by_country_altitude("Nepal", 8000) == [everest]
    assert repo.find_by_country_altitude("Nepal", 8848) == [everest]
    assert repo.find_by_country_altitude("Nepal", 9000) == []


def test_find_by_id_missing_returns_empty(repo):
    assert repo.find_by_id(1) == []


def test_reads_return_independent_copies(repo):
    everest = make_mountain()
    repo.add_all([everest])
    everest.altitude = 1

    snapshot = repo.list_all()
    snapshot[0].name = "Changed"
    snapshot.clear()

    stored = repo.list_all()
    assert stored[0].name == "Everest"
    assert stored[0].altitude == 8848


def test_clear(repo):
    repo.add_all([make_mountain(), make_mountain(id=2)])
    repo.clear()
    assert repo.list_all() == []
