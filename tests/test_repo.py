import sqlite3
import threading

import pytest

from movieApp.data import Movie


def test_insert_assigns_fresh_id_and_defaults(repo, movie_factory):
    repo.insert(movie_factory())

    [stored] = repo.all_movies()
    assert stored.id is not None and stored.id >= 1
    assert (stored.title, stored.genre, stored.rating) == ("Inception", "Sci-Fi", "9")
    assert stored.is_favorite is False


def test_insert_with_existing_id_overwrites(repo, movie_factory):
    repo.insert(movie_factory())
    [stored] = repo.all_movies()

    repo.insert(Movie(id=stored.id, title="Tenet", genre="Sci-Fi", rating="7"))

    assert [(m.id, m.title) for m in repo.all_movies()] == [(stored.id, "Tenet")]


def test_update_changes_fields_and_keeps_id(repo, movie_factory):
    repo.insert(movie_factory())
    [stored] = repo.all_movies()

    repo.update(Movie(id=stored.id, title="Inception (2010)", genre="Thriller", rating="10"))

    [after] = repo.all_movies()
    assert after.id == stored.id
    assert (after.title, after.genre, after.rating) == ("Inception (2010)", "Thriller", "10")


def test_update_unknown_id_does_nothing(repo, movie_factory):
    repo.insert(movie_factory())
    before = repo.all_movies()

    repo.update(Movie(id=999, title="Ghost", genre="Horror", rating="3"))

    assert repo.all_movies() == before


def test_delete_removes_and_unknown_delete_is_noop(repo, movie_factory):
    repo.insert(movie_factory(title="Alien"))
    repo.insert(movie_factory(title="Heat"))
    alien, heat = sorted(repo.all_movies(), key=lambda m: m.id)

    repo.delete(alien)
    assert [m.id for m in repo.all_movies()] == [heat.id]

    repo.delete(alien)
    repo.delete(Movie(id=12345, title="x", genre="y", rating="1"))
    assert [m.id for m in repo.all_movies()] == [heat.id]


def test_set_favorite_twice_restores_original(repo, movie_factory):
    repo.insert(movie_factory())
    [m] = repo.all_movies()

    repo.set_favorite(m.id, not m.is_favorite)
    assert repo.get_by_id(m.id).is_favorite is True

    repo.set_favorite(m.id, not repo.get_by_id(m.id).is_favorite)
    assert repo.get_by_id(m.id).is_favorite is m.is_favorite


def test_all_movies_newest_first(repo, movie_factory):
    for title in ("A", "B", "C", "D"):
        repo.insert(movie_factory(title=title))

    movies = repo.all_movies()
    ids = [m.id for m in movies]
    assert ids == sorted(ids, reverse=True)
    assert [m.title for m in movies] == ["D", "C", "B", "A"]


def test_ids_are_never_reused(repo, movie_factory):
    repo.insert(movie_factory(title="first"))
    [first] = repo.all_movies()
    repo.delete(first)

    repo.insert(movie_factory(title="second"))
    [second] = repo.all_movies()
    assert second.id > first.id


def test_get_by_id_found_and_missing(repo, movie_factory):
    repo.insert(movie_factory())
    [m] = repo.all_movies()

    assert repo.get_by_id(m.id) == m
    assert repo.get_by_id(m.id + 1) is None


@pytest.mark.parametrize("rating", ["0", "11", "5.5", "", "ten"])
def test_bad_rating_is_rejected_before_sql(repo, movie_factory, rating):
    with pytest.raises(ValueError):
        repo.insert(movie_factory(rating=rating))
    assert repo.all_movies() == []


def test_update_and_delete_need_an_id(repo, movie_factory):
    with pytest.raises(ValueError):
        repo.update(movie_factory())
    with pytest.raises(ValueError):
        repo.delete(movie_factory())


def test_storage_errors_propagate(repo, db, movie_factory):
    db.close()
    with pytest.raises(sqlite3.Error):
        repo.insert(movie_factory())


# ───────────────────────── live query ──────────────────────────────────
def test_get_all_pushes_current_list_then_every_change(repo, movie_factory):
    seen = []
    sub = repo.get_all(seen.append)
    assert seen == [[]]

    repo.insert(movie_factory())
    [m] = seen[-1]
    repo.set_favorite(m.id, True)
    repo.delete(m)

    assert len(seen) == 4
    assert seen[2][0].is_favorite is True
    assert seen[-1] == []
    assert sub.active


def test_noop_writes_do_not_emit(repo, movie_factory):
    seen = []
    repo.get_all(seen.append)

    repo.delete(Movie(id=42, title="x", genre="y", rating="1"))
    repo.set_favorite(42, True)

    assert seen == [[]]


def test_cancelled_subscription_gets_nothing_more(repo, movie_factory):
    seen = []
    sub = repo.get_all(seen.append)
    assert repo.subscriber_count == 1

    sub.cancel()
    sub.cancel()
    repo.insert(movie_factory())

    assert not sub.active
    assert repo.subscriber_count == 0
    assert seen == [[]]


def test_emissions_follow_write_order_across_threads(repo, movie_factory):
    seen = []
    repo.get_all(lambda movies: seen.append(len(movies)))

    def writer(n):
        for i in range(10):
            repo.insert(movie_factory(title=f"t{n}-{i}"))

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert seen == list(range(41))


def test_failing_subscriber_does_not_fail_the_write(repo, movie_factory, log_path):
    def picky(movies):
        if movies:
            raise RuntimeError("subscriber blew up")

    seen = []
    repo.get_all(picky)
    repo.get_all(seen.append)

    repo.insert(movie_factory())

    assert [m.title for m in repo.all_movies()] == ["Inception"]
    assert [[m.title for m in movies] for movies in seen] == [[], ["Inception"]]
    assert "subscriber blew up" in log_path.read_text(encoding="utf-8")


def test_subscriber_failing_on_first_list_is_not_registered(repo):
    def broken(movies):
        raise RuntimeError("no thanks")

    with pytest.raises(RuntimeError):
        repo.get_all(broken)
    assert repo.subscriber_count == 0


def test_set_favorite_needs_an_id(repo, movie_factory):
    repo.insert(movie_factory())
    seen = []
    repo.get_all(seen.append)

    with pytest.raises(ValueError):
        repo.set_favorite(None, True)

    assert len(seen) == 1
    assert [m.is_favorite for m in repo.all_movies()] == [False]
