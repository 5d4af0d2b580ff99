import threading
from datetime import datetime, timezone

import pytest

from video_catalog.domain.entities.video import Video
from video_catalog.domain.exceptions import VideoNotFoundError

CREATED_AT = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)


def make_video(repo, title="t"):
    return Video(id=repo.next_id(), title=title, author="a", created_at=CREATED_AT)


def test_starts_empty(repository):
    assert repository.list_all() == []


def test_next_id_is_strictly_increasing(repository):
    ids = [repository.next_id() for _ in range(5)]
    assert ids == sorted(set(ids))


def test_next_id_unique_across_threads(repository):
    ids = []
    lock = threading.Lock()

    def grab():
        for _ in range(200):
            new_id = repository.next_id()
            with lock:
                ids.append(new_id)

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(ids) == len(set(ids)) == 1600


def test_insert_keeps_insertion_order(repository):
    first = repository.insert(make_video(repository, "first"))
    second = repository.insert(make_video(repository, "second"))
    assert [v.id for v in repository.list_all()] == [first.id, second.id]


def test_list_all_is_a_snapshot(repository):
    repository.insert(make_video(repository))
    snapshot = repository.list_all()
    repository.clear()
    assert len(snapshot) == 1


def test_get_by_id(repository):
    video = repository.insert(make_video(repository))
    assert repository.get_by_id(video.id) == video
    assert repository.get_by_id(video.id + 100) is None


def test_replace_keeps_position(repository):
    first = repository.insert(make_video(repository, "first"))
    second = repository.insert(make_video(repository, "second"))
    renamed = Video(id=first.id, title="renamed", author="a", created_at=CREATED_AT)

    repository.replace(first.id, renamed)

    assert [v.title for v in repository.list_all()] == ["renamed", "second"]
    assert repository.get_by_id(second.id) == second


def test_replace_unknown_id(repository):
    with pytest.raises(VideoNotFoundError):
        repository.replace(42, Video(id=42, title="t", author="a", created_at=CREATED_AT))
    assert repository.list_all() == []


def test_delete_by_id(repository):
    keep = repository.insert(make_video(repository, "keep"))
    drop = repository.insert(make_video(repository, "drop"))

    repository.delete_by_id(drop.id)

    assert repository.list_all() == [keep]
    with pytest.raises(VideoNotFoundError):
        repository.delete_by_id(drop.id)


def test_clear(repository):
    repository.insert(make_video(repository))
    repository.insert(make_video(repository))
    repository.clear()
    assert repository.list_all() == []


def test_ids_not_reused_after_clear(repository):
    before = repository.insert(make_video(repository))
    repository.clear()
    after = repository.insert(make_video(repository))
    assert after.id > before.id


def test_update_merges_into_stored_record(repository):
    video = repository.insert(make_video(repository))

    updated = repository.update(video.id, title="renamed", can_be_downloaded=True)

    assert updated.title == "renamed"
    assert updated.can_be_downloaded is True
    assert updated.author == video.author
    assert repository.get_by_id(video.id) == updated


def test_update_unknown_id(repository):
    with pytest.raises(VideoNotFoundError):
        repository.update(7, title="t")


def test_concurrent_updates_keep_every_field(repository):
    video = repository.insert(make_video(repository))
    start = threading.Barrier(2)

    def set_field(**change):
        start.wait(timeout=5)
        for _ in range(500):
            repository.update(video.id, **change)

    threads = [
        threading.Thread(target=set_field, kwargs={"can_be_downloaded": True}),
        threading.Thread(target=set_field, kwargs={"min_age_restriction": 5}),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    stored = repository.get_by_id(video.id)
    assert stored.can_be_downloaded is True
    assert stored.min_age_restriction == 5
